import pytest

from paywire.integration.types import (
    DISCOVER_PATH,
    ActionKind,
    CodeChange,
    EditItem,
    Instructional,
    InvalidFileAction,
    Language,
    RenderContext,
)

_EDIT = EditItem(line="After imports", add="import os", why="Read env vars")


class TestCodeChange:
    def test_create_requires_code(self):
        with pytest.raises(InvalidFileAction) as exc_info:
            CodeChange(action=ActionKind.CREATE, path="a.js", description="x")
        assert exc_info.value.constraint == "create_has_code"

    def test_create_rejects_edits(self):
        with pytest.raises(InvalidFileAction) as exc_info:
            CodeChange(action=ActionKind.CREATE, path="a.js", description="x", code="1", edits=(_EDIT,))
        assert exc_info.value.constraint == "create_has_no_edits"

    @pytest.mark.parametrize("kind", [ActionKind.INSERT_CODE, ActionKind.MANUAL_EDIT])
    def test_edit_actions_require_edits(self, kind):
        with pytest.raises(InvalidFileAction):
            CodeChange(action=kind, path="server.js", description="x")

    def test_wire_payment_is_not_a_code_change(self):
        with pytest.raises(InvalidFileAction):
            CodeChange(action=ActionKind.WIRE_PAYMENT, path=DISCOVER_PATH, description="x", code="steps")

    def test_to_dict_omits_empty_fields(self):
        data = CodeChange(action=ActionKind.MANUAL_EDIT, path="app.py", description="d", edits=(_EDIT,)).to_dict()
        assert "code" not in data
        assert data["edits"] == [{"line": "After imports", "add": "import os", "why": "Read env vars"}]

    def test_error_message_names_the_path(self):
        with pytest.raises(InvalidFileAction, match="routes/razorpay.js"):
            CodeChange(action=ActionKind.CREATE, path="routes/razorpay.js", description="x")


class TestInstructional:
    def test_defaults_to_discover_path(self):
        action = Instructional(description="d", procedure="1. find it")
        assert action.path == DISCOVER_PATH
        assert action.action == ActionKind.WIRE_PAYMENT

    def test_blank_procedure_rejected(self):
        with pytest.raises(InvalidFileAction):
            Instructional(description="d", procedure="   ")

    def test_procedure_serialised_as_code(self):
        data = Instructional(description="d", procedure="steps").to_dict()
        assert data == {"action": "wire_payment", "path": "DISCOVER", "code": "steps", "description": "d"}


class TestRenderContext:
    def test_urls_derive_from_prefix(self):
        ctx = RenderContext(language=Language.JAVASCRIPT, api_prefix="/api/pay")
        assert ctx.order_url == "/api/pay/order"
        assert ctx.verify_url == "/api/pay/verify"

    def test_typed_only_for_typescript(self):
        assert RenderContext(language=Language.TYPESCRIPT).typed
        assert not RenderContext(language=Language.GO).typed
