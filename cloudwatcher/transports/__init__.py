from cloudwatcher.transports.http import HttpFetcher, NetworkError

__all__ = ["HttpFetcher", "NetworkError"]
