"""Shared configuration constants for wp-vite-local.

Centralizes file names, required .env keys and tool commands used by modules.
"""

import os
from pathlib import Path

ENV_FILE = ".env"
PACKAGE_JSON = "package.json"
COMPOSE_FILE = "docker-compose.yml"
THEME_COMMAND_FILE = "theme_command.js"
THEMES_DIR = Path("wp-content") / "themes"
LOG_DIR = "log"

NPM_CMD = "npm"
DOCKER_CMD = "docker"
# "docker compose" works too on newer Docker installs
COMPOSE_CMD = os.environ.get("WPDEV_COMPOSE", "docker-compose")
WPCLI_SERVICE = "wpcli"
DB_SERVICE = "db"

DB_MAX_ATTEMPTS = int(os.environ.get("WPDEV_DB_ATTEMPTS", "1000"))
PORT_CONFLICT_MARKERS = ("port is already allocated", "address already in use")

SITE_URL = "http://localhost"
ADMIN_EMAIL = "admin@example.com"
DEV_SERVER_URL = "http://localhost:5173"

DB_KEYS = ("MYSQL_DATABASE", "MYSQL_USER", "MYSQL_PASSWORD", "MYSQL_ROOT_PASSWORD")
SITE_KEYS = ("WP_SITE_TITLE", "WP_ADMIN_USER", "WP_ADMIN_PASSWORD")
THEME_KEYS = ("WP_THEME_DIR_NAME", "WP_THEME_AUTHOR")
REQUIRED_KEYS = DB_KEYS + SITE_KEYS + THEME_KEYS

ROOT_SCRIPTS = {
    "up": "docker-compose up -d",
    "stop": "docker-compose stop",
    "install": "node theme_command.js install",
    "command": "node theme_command.js",
    "dev": "node theme_command.js run dev",
    "build": "node theme_command.js run build",
}
THEME_SCRIPTS = {
    "dev": "vite",
    "build": "vite build",
}
ROOT_DEPENDENCIES = ("dotenv",)
THEME_DEPENDENCIES = ("vite", "sass")
