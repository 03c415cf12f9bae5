"""Fixed artifact templates stored under wpdev/data.

Templates are written verbatim: docker-compose resolves ${VAR} itself at
container start, from the project's .env.
"""

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"

COMPOSE = "docker-compose.yml.txt"
VITE_CONFIG = "vite.config.mjs.txt"
INDEX_HTML = "index.html.txt"
IMPORT_SASS_JS = "import_sass.js.txt"
ENQUEUE_PHP = "enqueue_scripts.php.txt"
THEME_COMMAND_JS = "theme_command.js.txt"


def render(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")
