from pathlib import Path


class ProjectRootNotFound(Exception):
    pass


def get_project_root_dir() -> Path:
    """Look for the root pyproject.toml of a source checkout"""
    current = Path(__file__).parent

    # An installed copy must not pick up a pyproject.toml of the
    # project its environment lives in
    while current.name != "site-packages":
        candidate = current / "pyproject.toml"
        if candidate.exists():
            return current

        parent = current.parent
        if parent == current:
            raise ProjectRootNotFound

        current = parent

    raise ProjectRootNotFound
