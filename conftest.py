import os

# Tests run against a fresh in-memory store without demo records
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_DEMO_DATA", "false")
