from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
CATALOG_FILE = DATA_DIR / 'plan_catalog.json'

__all__ = ['DATA_DIR', 'CATALOG_FILE']
