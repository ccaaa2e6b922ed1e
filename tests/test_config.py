from config.config import ENGINE_CONFIG, validate_config


def test_validate_config():
    assert validate_config()
    assert ENGINE_CONFIG["precedence"]["*"] > ENGINE_CONFIG["precedence"]["+"]
