def test_paywire_imports():
    """Verify all paywire subpackages can be imported without errors."""
    import paywire
    import paywire.api.main
    import paywire.core.config
    import paywire.detector
    import paywire.integration
    import paywire.mcp_server.server
    import paywire.tools

    assert paywire.__version__
