"""Types for the integration plan module.

IntegrationPlan is the single output of the generator. Its files are a
tagged union of FileAction variants:

  CodeChange    : create / insert_code / manual_edit, applied mechanically
  Instructional : wire_payment, a natural-language procedure with no
                  machine-checkable effect

Every type is frozen and serialises to the camelCase JSON shape agents
consume via to_dict().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    GO = "go"


class BackendFramework(str, Enum):
    EXPRESS = "express"
    NEXTJS = "nextjs"
    DJANGO = "django"
    FLASK = "flask"
    FASTAPI = "fastapi"
    GIN = "gin"
    ECHO = "echo"
    FIBER = "fiber"


class FrontendFramework(str, Enum):
    VANILLA = "vanilla"
    REACT = "react"
    NEXTJS = "nextjs"
    VUE = "vue"
    NUXT = "nuxt"
    ANGULAR = "angular"
    SVELTE = "svelte"
    SOLID = "solid"


class ActionKind(str, Enum):
    CREATE = "create"
    INSERT_CODE = "insert_code"
    MANUAL_EDIT = "manual_edit"
    WIRE_PAYMENT = "wire_payment"


DISCOVER_PATH = "DISCOVER"


class InvalidFileAction(Exception):
    """Raised when a FileAction is constructed in an inconsistent shape.

    Carries which constraint was violated and the offending path.
    """

    def __init__(self, constraint: str, detail: str):
        self.constraint = constraint
        self.detail = detail
        super().__init__(f"Constraint '{constraint}' violated: {detail}")


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every template in one plan.

    Holds env var *names*, never credential values: generated code looks
    the key pair up at the target project's runtime.
    """

    language: Language
    api_prefix: str = "/api/razorpay"
    key_id_env: str = "RAZORPAY_KEY_ID"
    key_secret_env: str = "RAZORPAY_KEY_SECRET"

    @property
    def typed(self) -> bool:
        return self.language == Language.TYPESCRIPT

    @property
    def order_url(self) -> str:
        return f"{self.api_prefix}/order"

    @property
    def verify_url(self) -> str:
        return f"{self.api_prefix}/verify"


@dataclass(frozen=True)
class EditItem:
    """One ordered step of an edit sequence.

    line: human-readable locator. add: literal code. why: rationale.
    """

    line: str
    add: str
    why: str

    def to_dict(self) -> dict:
        return {"line": self.line, "add": self.add, "why": self.why}


@dataclass(frozen=True)
class CodeChange:
    """A concrete file operation: create a file or apply ordered edits."""

    action: ActionKind
    path: str
    description: str
    code: str = ""
    edits: tuple[EditItem, ...] = ()

    def __post_init__(self) -> None:
        if self.action == ActionKind.WIRE_PAYMENT:
            raise InvalidFileAction("code_change_kind", f"{self.path}: use Instructional for wire_payment")
        if self.action == ActionKind.CREATE:
            if not self.code:
                raise InvalidFileAction("create_has_code", f"{self.path}: create action without code")
            if self.edits:
                raise InvalidFileAction("create_has_no_edits", f"{self.path}: create action with edits")
        elif not self.edits:
            raise InvalidFileAction("edit_has_edits", f"{self.path}: {self.action.value} action without edits")

    def to_dict(self) -> dict:
        data: dict = {"action": self.action.value, "path": self.path}
        if self.code:
            data["code"] = self.code
        data["description"] = self.description
        if self.edits:
            data["edits"] = [edit.to_dict() for edit in self.edits]
        return data


@dataclass(frozen=True)
class Instructional:
    """A procedure for the consumer to follow; it edits nothing by itself."""

    description: str
    procedure: str
    path: str = DISCOVER_PATH

    def __post_init__(self) -> None:
        if not self.procedure.strip():
            raise InvalidFileAction("instructional_has_procedure", f"{self.path}: empty procedure")

    @property
    def action(self) -> ActionKind:
        return ActionKind.WIRE_PAYMENT

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "path": self.path,
            "code": self.procedure,
            "description": self.description,
        }


FileAction = Union[CodeChange, Instructional]


@dataclass(frozen=True)
class Dependency:
    name: str
    install_command: str

    def to_dict(self) -> dict:
        return {"name": self.name, "installCommand": self.install_command}


@dataclass(frozen=True)
class EnvVar:
    name: str
    value: str

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class FrontendIntegration:
    """A rendered frontend artifact plus the hint for loading it."""

    framework: str
    file_name: str
    code: str
    script_tag: str
    description: str


@dataclass(frozen=True)
class BackendIntegration:
    """Everything a backend family contributes to a plan.

    created: new route/handler files. wiring: ordered edits against the
    project's existing entry points. packages: dependency names in install
    order. setup_steps: backend steps for the agent, after installing
    packages.
    """

    label: str
    created: tuple[CodeChange, ...]
    wiring: tuple[CodeChange, ...] = ()
    packages: tuple[str, ...] = ()
    setup_steps: tuple[str, ...] = ()
    env_file: str = ".env"


@dataclass(frozen=True)
class IntegrationPlan:
    """Complete, ready-to-apply description of a checkout integration.

    Constructed fresh per request and never mutated afterwards.
    """

    summary: str
    files: tuple[FileAction, ...]
    dependencies: tuple[Dependency, ...]
    env_vars: tuple[EnvVar, ...]
    test_instructions: str
    ai_instructions: str

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "files": [action.to_dict() for action in self.files],
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "envVars": [var.to_dict() for var in self.env_vars],
            "testInstructions": self.test_instructions,
            "aiInstructions": self.ai_instructions,
        }

    def wire_payment_actions(self) -> list[Instructional]:
        return [action for action in self.files if isinstance(action, Instructional)]

    def find(self, path: str) -> Optional[FileAction]:
        """Return the first action targeting `path`, if any."""
        for action in self.files:
            if action.path == path:
                return action
        return None
