import pytest

from paywire.integration.templates import (
    BACKEND_REGISTRY,
    FRONTEND_REGISTRY,
    coerce_backend,
    coerce_frontend,
    get_backend,
    get_frontend,
)
from paywire.integration.templates.base import fill
from paywire.integration.templates.frontend import NuxtFrontend, VanillaFrontend
from paywire.integration.templates.go import FiberBackend, GinBackend
from paywire.integration.templates.node import ExpressBackend
from paywire.integration.types import (
    ActionKind,
    BackendFramework,
    FrontendFramework,
    Language,
    RenderContext,
)

JS = RenderContext(language=Language.JAVASCRIPT)
TS = RenderContext(language=Language.TYPESCRIPT)


class TestRegistries:
    def test_every_frontend_registered(self):
        assert set(FRONTEND_REGISTRY) == set(FrontendFramework)

    def test_every_backend_registered(self):
        assert set(BACKEND_REGISTRY) == set(BackendFramework)

    def test_unknown_frontend_falls_back_to_vanilla(self):
        assert isinstance(get_frontend("htmx"), VanillaFrontend)
        assert isinstance(get_frontend(None), VanillaFrontend)

    def test_unknown_backend_falls_back_to_express(self):
        assert isinstance(get_backend("rails"), ExpressBackend)

    def test_keys_are_case_insensitive(self):
        assert coerce_backend(" Gin ") == BackendFramework.GIN
        assert coerce_frontend("NUXT") == FrontendFramework.NUXT


class TestFill:
    def test_substitutes_context_values(self):
        assert fill("fetch('%%order_url')", JS) == "fetch('/api/razorpay/order')"

    def test_dollar_braces_pass_through(self):
        assert fill("`${amount}` %%verify_url", JS) == "`${amount}` /api/razorpay/verify"

    def test_unknown_placeholder_raises(self):
        with pytest.raises(KeyError):
            fill("%%nope", JS)


class TestFrontendTemplates:
    @pytest.mark.parametrize("key", list(FrontendFramework))
    def test_no_placeholder_left_behind(self, key):
        for ctx in (JS, TS):
            code = get_frontend(key).build(ctx).code
            assert "%%" not in code

    def test_react_extension_follows_language(self):
        assert get_frontend("react").file_name(JS).endswith(".jsx")
        assert get_frontend("react").file_name(TS).endswith(".tsx")

    def test_nextjs_defaults_to_tsx(self):
        ctx = RenderContext(language=Language.PYTHON)
        assert get_frontend("nextjs").file_name(ctx) == "components/RazorpayCheckout.tsx"

    def test_nuxt_is_client_only(self):
        assert "ClientOnly" in NuxtFrontend.script_tag


class TestBackendTemplates:
    def test_express_ts_uses_imports(self):
        rendered = ExpressBackend().render(TS)
        assert rendered.created[0].path == "routes/razorpay.ts"
        wiring = rendered.wiring[0]
        assert wiring.action == ActionKind.INSERT_CODE
        assert wiring.path == "server.ts"
        assert wiring.edits[0].add == "import 'dotenv/config';"

    def test_express_edit_order(self):
        edits = ExpressBackend().render(JS).wiring[0].edits
        assert [edit.add for edit in edits] == [
            "require('dotenv').config();",
            "const razorpayRoutes = require('./routes/razorpay');",
            "app.use('/api/razorpay', razorpayRoutes);",
        ]

    def test_express_verifies_with_timing_safe_compare(self):
        code = ExpressBackend().render(JS).created[0].code
        assert "timingSafeEqual" in code
        assert "process.env.RAZORPAY_KEY_SECRET" in code

    def test_language_fallback(self):
        assert ExpressBackend().resolve_language(Language.GO) == Language.JAVASCRIPT
        assert get_backend("nextjs").resolve_language(None) == Language.TYPESCRIPT
        assert get_backend("django").resolve_language(Language.TYPESCRIPT) == Language.PYTHON

    def test_nextjs_routes_follow_urls(self):
        rendered = get_backend("nextjs").render(TS)
        assert [c.path for c in rendered.created] == [
            "app/api/razorpay/order/route.ts",
            "app/api/razorpay/verify/route.ts",
        ]
        assert rendered.wiring == ()
        assert rendered.env_file == ".env.local"

    def test_django_edits_settings_and_urls(self):
        rendered = get_backend("django").render(RenderContext(language=Language.PYTHON))
        assert [c.path for c in rendered.wiring] == ["settings.py", "urls.py"]
        assert all(c.action == ActionKind.MANUAL_EDIT for c in rendered.wiring)

    def test_go_route_registration_per_framework(self):
        ctx = RenderContext(language=Language.GO)
        gin_edits = GinBackend().render(ctx).wiring[0].edits
        fiber_edits = FiberBackend().render(ctx).wiring[0].edits
        assert gin_edits[1].add.startswith("r.POST(")
        assert fiber_edits[1].add.startswith("app.Post(")
        assert "/api/razorpay/order" in gin_edits[1].add

    @pytest.mark.parametrize("key", list(BackendFramework))
    def test_no_placeholder_left_behind(self, key):
        backend = get_backend(key)
        ctx = RenderContext(language=backend.resolve_language(None))
        for change in backend.render(ctx).created:
            assert "%%" not in change.code


class TestAmountConversion:
    @pytest.mark.parametrize("key", list(BackendFramework))
    def test_paise_conversion_rounds(self, key):
        backend = get_backend(key)
        ctx = RenderContext(language=backend.resolve_language(None))
        lines = [
            line
            for change in backend.render(ctx).created
            for line in change.code.splitlines()
            if "* 100" in line
        ]
        assert lines
        assert all("round" in line.lower() for line in lines)

    def test_go_imports_math(self):
        code = GinBackend().render(RenderContext(language=Language.GO)).created[0].code
        assert '\t"math"\n' in code
        assert "int(math.Round(req.Amount * 100))" in code
