from .icon_downloader import HttpxIconDownloader
from .page_fetcher import HttpxPageFetcher

__all__ = ["HttpxIconDownloader", "HttpxPageFetcher"]
