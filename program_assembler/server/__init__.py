"""HTTP API for the program assembler (FastAPI)."""
