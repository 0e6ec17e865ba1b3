from paywire.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RAZORPAY_KEY_ID", raising=False)
        monkeypatch.delenv("TOOLSETS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.razorpay_key_id == ""
        assert settings.toolsets == ["all"]
        assert settings.read_only is False

    def test_toolsets_comma_separated(self, monkeypatch):
        monkeypatch.setenv("TOOLSETS", "checkout_integration, ,all")
        assert Settings(_env_file=None).toolsets == ["checkout_integration", "all"]

    def test_credentials_stripped(self, monkeypatch):
        monkeypatch.setenv("RAZORPAY_KEY_ID", "  rzp_test_xyz\n")
        assert Settings(_env_file=None).razorpay_key_id == "rzp_test_xyz"

    def test_read_only_from_env(self, monkeypatch):
        monkeypatch.setenv("READ_ONLY", "true")
        assert Settings(_env_file=None).read_only is True
