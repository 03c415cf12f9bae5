"""Local WordPress + Vite environment provisioning.

Submodules:
- utils: logging, console status lines, subprocess runner
- env: .env loading
- steps: idempotent step model and runner
- npm: package manifests and dependencies
- compose: docker / docker-compose and the database readiness poll
- layout: theme source layout for Vite
- wordpress: wp-cli wrappers, core install, theme scaffold and patch
- provisioner: the ordered pipeline
- theme_command: npm forwarding into the theme directory
"""
