from table_cache.modules.errors import InvalidConfiguration, KeyNotFound, TableCacheError


def test_error_codes_in_str():
    assert str(TableCacheError("plain")) == "plain"
    assert str(InvalidConfiguration("bad", config_key="capacity")) == "[CONFIG_ERROR] bad"
    assert str(KeyNotFound("t1")) == "[KEY_NOT_FOUND] key not in cache: 't1'"


def test_errors_share_base_and_builtin_types():
    assert isinstance(KeyNotFound("x"), TableCacheError)
    assert isinstance(KeyNotFound("x"), KeyError)
    assert isinstance(InvalidConfiguration("x"), ValueError)
