"""Run a quick in-process request against the app.

Prints the status and JSON body of `/health` and `/api/roles` using
FastAPI's TestClient (needs the `test` extra for httpx).
"""

import sys
import os

# Ensure backend folder is on sys.path so `career_explorer` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from career_explorer.main import app


def run_testclient():
    client = TestClient(app)
    for path in ('/health', '/api/roles'):
        resp = client.get(path)
        print(path, 'STATUS:', resp.status_code)
        print('JSON:', resp.json())


if __name__ == '__main__':
    run_testclient()
