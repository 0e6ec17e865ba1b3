import pytest

from paywire.integration.dependencies import install_verb, resolve_dependencies


class TestInstallVerb:
    @pytest.mark.parametrize(
        "ecosystem,pm,expected",
        [
            ("node", None, "npm install"),
            ("node", "yarn", "yarn add"),
            ("node", "PNPM", "pnpm add"),
            ("python", "poetry", "poetry add"),
            ("python", "uv", "uv add"),
            ("go", "go-mod", "go get"),
        ],
    )
    def test_verbs(self, ecosystem, pm, expected):
        assert install_verb(ecosystem, pm) == expected

    def test_unknown_pm_uses_default(self):
        assert install_verb("python", "conda") == "pip install"

    def test_foreign_pm_uses_default(self):
        assert install_verb("node", "pip") == "npm install"


class TestResolveDependencies:
    def test_install_commands_per_package(self):
        deps = resolve_dependencies("node", ("razorpay", "dotenv"), "bun")
        assert [(d.name, d.install_command) for d in deps] == [
            ("razorpay", "bun add razorpay"),
            ("dotenv", "bun add dotenv"),
        ]

    def test_duplicates_dropped_in_order(self):
        deps = resolve_dependencies("python", ("razorpay", "python-dotenv", "razorpay"))
        assert [d.name for d in deps] == ["razorpay", "python-dotenv"]
