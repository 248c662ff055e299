import os

# every test runs against a private in-memory database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")
