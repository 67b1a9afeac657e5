"""src/urledit/utils/__init__.py"""

from .validators import check_valid, check_valid_http_url

__all__ = ["check_valid", "check_valid_http_url"]
