"""Tests for IntegrationPlanGenerator across the whole stack matrix."""

import itertools
import re

import pytest

from paywire.credentials import KEY_ID_PLACEHOLDER, KEY_SECRET_PLACEHOLDER
from paywire.integration import IntegrationPlanGenerator
from paywire.integration.instructions import TEST_INSTRUCTIONS
from paywire.integration.types import (
    ActionKind,
    BackendFramework,
    CodeChange,
    FrontendFramework,
    Instructional,
    Language,
)

_MATRIX = list(
    itertools.product(
        [lang.value for lang in Language],
        [backend.value for backend in BackendFramework],
        [frontend.value for frontend in FrontendFramework],
    )
)

_FETCH_URL = re.compile(r"fetch\('([^']*)'")


@pytest.mark.parametrize("language,backend,frontend", _MATRIX)
def test_plan_shape_for_every_stack(generator, razorpay_keys, language, backend, frontend):
    plan = generator.generate(language, backend, frontend)

    creates = [a for a in plan.files if a.action == ActionKind.CREATE]
    assert creates
    assert all(a.code for a in creates)

    wire = plan.wire_payment_actions()
    assert len(wire) == 1
    assert plan.files[-1] is wire[0]

    assert plan.dependencies
    assert [v.name for v in plan.env_vars] == ["RAZORPAY_KEY_ID", "RAZORPAY_KEY_SECRET"]
    assert plan.test_instructions == TEST_INSTRUCTIONS

    for action in plan.files:
        if isinstance(action, CodeChange):
            assert razorpay_keys[1] not in action.code
            assert all(razorpay_keys[1] not in edit.add for edit in action.edits)


class TestGenerator:
    def test_is_deterministic(self, generator):
        first = generator.generate("typescript", "express", "react")
        second = generator.generate("typescript", "express", "react")
        assert first.to_dict() == second.to_dict()

    def test_env_vars_carry_configured_credentials(self, generator, razorpay_keys):
        plan = generator.generate("javascript", "express", "vanilla")
        assert tuple(v.value for v in plan.env_vars) == razorpay_keys

    def test_placeholders_without_credentials(self):
        plan = IntegrationPlanGenerator().generate("python", "flask", "vanilla")
        assert [v.value for v in plan.env_vars] == [KEY_ID_PLACEHOLDER, KEY_SECRET_PLACEHOLDER]

    def test_unknown_backend_renders_express(self, generator):
        plan = generator.generate("javascript", "rails", "vanilla")
        assert plan.summary.endswith("Express + Vanilla JS")
        assert plan.find("routes/razorpay.js") is not None

    def test_unknown_language_uses_backend_default(self, generator):
        plan = generator.generate("cobol", "nextjs", "react")
        assert plan.find("app/api/razorpay/order/route.ts") is not None

    def test_express_file_order(self, generator):
        plan = generator.generate("javascript", "express", "vanilla")
        assert [a.path for a in plan.files] == [
            "routes/razorpay.js",
            "public/js/razorpay.js",
            "server.js",
            "DISCOVER",
        ]
        assert [a.action for a in plan.files] == [
            ActionKind.CREATE,
            ActionKind.CREATE,
            ActionKind.INSERT_CODE,
            ActionKind.WIRE_PAYMENT,
        ]

    def test_express_dotenv_edit_comes_first(self, generator):
        server = generator.generate("javascript", "express", "vanilla").find("server.js")
        adds = [edit.add for edit in server.edits]
        assert adds[0] == "require('dotenv').config();"
        assert adds.index("const razorpayRoutes = require('./routes/razorpay');") < adds.index(
            "app.use('/api/razorpay', razorpayRoutes);"
        )

    @pytest.mark.parametrize("frontend", [f.value for f in FrontendFramework])
    def test_frontend_calls_stay_under_api_prefix(self, generator, frontend):
        plan = generator.generate("typescript", "express", frontend)
        code = plan.files[1].code
        urls = _FETCH_URL.findall(code)
        assert urls
        assert all(url.startswith("/api/razorpay") for url in urls)

    @pytest.mark.parametrize("frontend", ["react", "vanilla"])
    def test_nextjs_backend_promotes_frontend(self, generator, frontend):
        plan = generator.generate("typescript", "nextjs", frontend)
        assert plan.find("components/RazorpayCheckout.tsx") is not None

    def test_nextjs_backend_keeps_vue(self, generator):
        plan = generator.generate("typescript", "nextjs", "vue")
        assert plan.find("src/components/RazorpayButton.vue") is not None

    def test_frontend_follows_requested_flavour_behind_python(self, generator):
        plan = generator.generate("typescript", "fastapi", "react")
        assert plan.find("src/components/RazorpayButton.tsx") is not None
        assert plan.find("routers/razorpay.py") is not None

    def test_package_manager_changes_install_commands(self, generator):
        plan = generator.generate("python", "django", "vanilla", package_manager="poetry")
        assert [d.install_command for d in plan.dependencies] == ["poetry add razorpay"]
        assert "1) poetry add razorpay" in plan.ai_instructions

    def test_go_dependency(self, generator):
        plan = generator.generate("go", "echo", "vanilla")
        assert plan.dependencies[0].install_command.startswith("go get github.com/razorpay/razorpay-go")

    def test_express_uses_server_rendered_procedure(self, generator):
        wire = generator.generate("javascript", "express", "vanilla").files[-1]
        assert isinstance(wire, Instructional)
        assert "FIND WHICH JS FILE IS LOADED BY THAT HTML" in wire.procedure

    def test_other_backends_use_generic_procedure(self, generator):
        wire = generator.generate("python", "flask", "vue").files[-1]
        assert "For SPAs" in wire.procedure

    def test_project_hints(self, generator):
        plan = generator.generate(
            "javascript",
            "express",
            "vanilla",
            existing_order_endpoint="/api/orders/create",
            existing_payment_function="placeOrder",
        )
        assert "**PROJECT HINTS:**" in plan.ai_instructions
        assert "/api/orders/create" in plan.ai_instructions
        assert "placeOrder" in plan.ai_instructions

    def test_no_hints_block_without_hints(self, generator):
        plan = generator.generate("javascript", "express", "vanilla")
        assert "PROJECT HINTS" not in plan.ai_instructions

    def test_to_dict_shape(self, generator):
        data = generator.generate("go", "gin", "svelte").to_dict()
        assert set(data) == {
            "summary",
            "files",
            "dependencies",
            "envVars",
            "testInstructions",
            "aiInstructions",
        }
        assert data["files"][-1]["action"] == "wire_payment"
        assert data["dependencies"][0]["installCommand"]


# ---------------------------------------------------------------------------
# Backend routes must serve the URLs the frontend calls
# ---------------------------------------------------------------------------

def _plan_text(plan) -> str:
    parts = []
    for action in plan.files:
        if isinstance(action, CodeChange):
            parts.append(action.code)
            parts.extend(edit.add for edit in action.edits)
    return "\n".join(parts)


def _join(prefix: str, route: str) -> str:
    return "/" + "/".join(part.strip("/") for part in (prefix, route) if part.strip("/"))


def _served_routes(backend: str, plan) -> set[str]:
    text = _plan_text(plan)
    if backend == "express":
        prefix = re.search(r"app\.use\('([^']+)', razorpayRoutes\)", text).group(1)
        return {prefix + sub for sub in re.findall(r"router\.post\('([^']+)'", text)}
    if backend == "nextjs":
        return {
            re.fullmatch(r"app(/.+)/route\.\w+", a.path).group(1)
            for a in plan.files
            if a.path.endswith(("route.ts", "route.js"))
        }
    if backend == "django":
        mount = re.search(r"path\('([^']*)', include\('razorpay_payments\.urls'\)\)", text).group(1)
        # Django patterns match literally: no slash is added or stripped.
        return {"/" + mount + sub for sub in re.findall(r"path\('([^']*)', views\.", text)}
    if backend == "flask":
        prefix = re.search(r"url_prefix='([^']+)'", text).group(1)
        return {_join(prefix, sub) for sub in re.findall(r"@razorpay_bp\.route\('([^']+)'", text)}
    if backend == "fastapi":
        prefix = re.search(r'APIRouter\(prefix="([^"]+)"', text).group(1)
        return {prefix + sub for sub in re.findall(r'@router\.post\("([^"]+)"\)', text)}
    return set(re.findall(r'\("(/[^"]+)", handlers\.', text))


class TestRouteAgreement:
    @pytest.mark.parametrize("backend", [b.value for b in BackendFramework])
    @pytest.mark.parametrize("frontend", ["react", "vue", "vanilla"])
    def test_backend_serves_frontend_urls(self, generator, backend, frontend):
        plan = generator.generate("typescript", backend, frontend)
        fetched = set(_FETCH_URL.findall(_plan_text(plan)))
        assert fetched == {"/api/razorpay/order", "/api/razorpay/verify"}
        assert _served_routes(backend, plan) == fetched

    def test_django_routes_have_no_trailing_slash(self, generator):
        plan = generator.generate("python", "django", "react")
        urls = plan.find("razorpay_payments/urls.py").code
        assert "path('order', views.create_order" in urls
        assert "path('verify', views.verify_payment" in urls
