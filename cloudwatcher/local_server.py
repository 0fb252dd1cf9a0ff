import argparse
import sys

import uvicorn

from cloudwatcher.local_server_app import create_app, ServerSettings


class LocalServer:
    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(self.app, host=self.settings.server_ip, port=self.settings.server_port, log_level="info")


def main():
    parser = argparse.ArgumentParser(description="Start the Cloudwatcher local server.")
    parser.add_argument("--ip", type=str, default="127.0.0.1", help="IP address to bind the local server to.")
    parser.add_argument("--port", type=int, default=10290, help="Port to run the local server on.")
    parser.add_argument("--address", type=str, default=None, help="URL of the Cloudwatcher data page.")
    args = parser.parse_args()

    overrides = {"server_ip": args.ip, "server_port": args.port}
    if args.address:
        overrides["device_address"] = args.address
    server = LocalServer(ServerSettings(**overrides))
    server.start()


if __name__ == "__main__":
    sys.exit(main())
