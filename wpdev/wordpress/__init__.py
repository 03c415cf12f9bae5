"""WordPress operations run through the wpcli container.

Submodules:
- cli: wp-cli wrappers
- installer: core install
- themes: theme scaffold and functions.php patch
"""
