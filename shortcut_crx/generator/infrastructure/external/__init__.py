from .async_files import copy_file, file_exists
from .beautiful_soup_adapter import BeautifulSoupAdapter

__all__ = ["BeautifulSoupAdapter", "copy_file", "file_exists"]
