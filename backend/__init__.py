"""
Job Search Proxy Backend.

Core components:
- api: FastAPI app and the /api/jobs endpoint
- tools: Mino browser-automation client
- utils: SSE line framing
"""
