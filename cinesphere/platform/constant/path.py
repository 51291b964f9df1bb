from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Package directory
PACKAGE_DIR = BASE_DIR / 'cinesphere'

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Bundled catalog seed
CATALOG_SEED_FILE = (
    PACKAGE_DIR / 'service' / 'booking' / 'driven_adapter' / 'seed' / 'catalog_seed.json'
)
