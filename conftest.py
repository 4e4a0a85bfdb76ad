import os

# Keep the import-time default database away from the working tree
os.environ["BABYMUSIC_DATABASE_URL"] = "sqlite://"


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "statistical: repeated randomized trials of the selection policy"
    )
