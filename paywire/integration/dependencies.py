"""Install command resolution per ecosystem and package manager."""

from typing import Optional

from paywire.integration.types import Dependency

# ecosystem -> (default package manager, {package manager: install verb})
INSTALL_COMMANDS: dict[str, tuple[str, dict[str, str]]] = {
    "node": (
        "npm",
        {
            "npm": "npm install",
            "yarn": "yarn add",
            "pnpm": "pnpm add",
            "bun": "bun add",
        },
    ),
    "python": (
        "pip",
        {
            "pip": "pip install",
            "poetry": "poetry add",
            "uv": "uv add",
            "pipenv": "pipenv install",
        },
    ),
    "go": ("go", {"go": "go get"}),
}


def install_verb(ecosystem: str, package_manager: Optional[str] = None) -> str:
    """Return the install command prefix, e.g. "yarn add".

    An unknown or missing package manager uses the ecosystem default.
    """
    default, verbs = INSTALL_COMMANDS[ecosystem]
    pm = (package_manager or "").strip().lower()
    return verbs.get(pm, verbs[default])


def resolve_dependencies(
    ecosystem: str,
    packages: tuple[str, ...],
    package_manager: Optional[str] = None,
) -> tuple[Dependency, ...]:
    """Attach install commands to packages, dropping duplicates in order."""
    verb = install_verb(ecosystem, package_manager)
    seen: set[str] = set()
    deps: list[Dependency] = []
    for name in packages:
        if name in seen:
            continue
        seen.add(name)
        deps.append(Dependency(name=name, install_command=f"{verb} {name}"))
    return tuple(deps)
