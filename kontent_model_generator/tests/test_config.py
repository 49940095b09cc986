from kontent_model_generator.config import CollisionPolicy, FormatterConfig, GeneratorConfig


def test_defaults():
    config = GeneratorConfig()
    assert config.add_timestamp is False
    assert config.name_resolver is None
    assert config.custom_name_resolver is None
    assert config.on_filename_collision == CollisionPolicy.ERROR
    assert config.formatter.enabled is False


def test_from_dict():
    config = GeneratorConfig.from_dict(
        {
            "add_timestamp": True,
            "name_resolver": "camelCase",
            "on_filename_collision": "overwrite",
            "formatter": {"enabled": True, "print_width": 120, "unknown": 1},
            "not_an_option": "ignored",
        }
    )
    assert config.add_timestamp is True
    assert config.name_resolver == "camelCase"
    assert config.on_filename_collision is CollisionPolicy.OVERWRITE
    assert config.formatter == FormatterConfig(enabled=True, print_width=120)
    assert not hasattr(config, "not_an_option")


def test_to_dict_round_trip():
    config = GeneratorConfig(name_resolver="snakeCase", elements_namespace="Elements", custom_name_resolver=lambda t, e: e)
    d = config.to_dict()
    assert "custom_name_resolver" not in d
    restored = GeneratorConfig.from_dict(d)
    assert restored.to_dict() == d
