"""FastAPI server package for the menu administration backend."""
