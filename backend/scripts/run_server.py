"""Start the API server after checking that the database is reachable.
Usage: python scripts/run_server.py [--host HOST] [--port PORT] [--reload]
"""
import sys
import argparse
import pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
import uvicorn
from career_explorer.config import settings
from career_explorer.database import check_connection


def main(host: str, port: int, reload: bool = False) -> int:
    print('Testing database connection...')
    if not check_connection():
        print('Failed to connect to database. Server not started.')
        return 1
    print(f'Server starting on http://{host}:{port}')
    print(f'API endpoints available at http://{host}:{port}/api')
    print(f'Health check at http://{host}:{port}/health')
    uvicorn.run('career_explorer.main:app', host=host, port=port, reload=reload, app_dir=str(ROOT))
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=settings.PORT)
    parser.add_argument('--reload', action='store_true')
    args = parser.parse_args()
    sys.exit(main(args.host, args.port, reload=args.reload))
