"""frontline: keep local copies of sequentially numbered web pages' images.

Each run walks every configured source from its saved page index until the
next page does not exist yet, downloads the image found on each page and
stores the advanced indices back into the state file.
"""

__version__ = "0.1.0"
