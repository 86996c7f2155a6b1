"""Allow running with: python -m threebody.api"""
from threebody.api.api_server import main

raise SystemExit(main())
