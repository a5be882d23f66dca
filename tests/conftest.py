# The pytest11 entry point registers this fixture once mockfs is installed;
# importing it here also makes it available when running from a source tree.
from mockfs.pytest_plugin import mock_fs  # noqa: F401
