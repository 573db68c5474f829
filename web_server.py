"""Web server entry point for the Assessment Genie API"""

import socket
import sys

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env before settings are read
load_dotenv()

from genie.utils.config import load_settings
from genie.utils.exceptions import ConfigError
from genie_web.main import create_app


def _port_in_use(host: str, port: int) -> bool:
    """Return True if the given port is already in use."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
            return False
        except OSError:
            return True


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    host = settings.server.host
    port = settings.server.port
    if _port_in_use(host, port):
        print(f"Port {port} is in use. Stop the process using it or set PORT to a different number.")
        sys.exit(1)

    print(f"Starting {settings.app.name} API...")
    print(f"Server will be available at: http://localhost:{port}")
    uvicorn.run(create_app(settings), host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
