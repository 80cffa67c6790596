"""Pure domain utilities: debugger detection and page rendering.

Free of FastAPI/HTTP concerns so both the server and the smoke runner can
import them.
"""
__all__ = ["debugger", "page"]
