"""Version information for TopicTalk.

The version is read from the installed distribution metadata.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("topictalk")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "0.0.0-dev"
