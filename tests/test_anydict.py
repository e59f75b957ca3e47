import json

import pytest

from novakit.anyarray import AnyArray
from novakit.anydict import AnyDict, AnyOrderlyItem, cast, zip_dict


@pytest.fixture
def scores():
    return AnyDict().set("分数", 18).set("年龄", 100)


@pytest.fixture
def texts():
    return AnyDict().set("分数", "18").set("年龄", "100").set("税务", "")


@pytest.fixture
def with_zero():
    return AnyDict().set("分数", 18).set("年龄", 100).set("税务", 0)


def test_to_dict(scores):
    assert scores.to_dict() == {"分数": 18, "年龄": 100}


def test_init_from_mapping():
    d = AnyDict({"a": 1, "b": 2})
    assert str(d.keys()) == "[a b]"
    assert d.get_value_by_key("b") == 2


def test_get_key_by_index(scores):
    assert scores.get_key_by_index(0) == "分数"


def test_get_key_by_index_out_of_range(scores):
    with pytest.raises(IndexError):
        scores.get_key_by_index(5)


def test_get_keys_by_indexes(scores):
    assert str(scores.get_keys_by_indexes(0, 1)) == "[分数 年龄]"


def test_get_key_by_value(scores):
    assert scores.get_key_by_value(18) == "分数"
    assert scores.get_key_by_value(999) is None


def test_get_keys_by_values(scores):
    assert str(scores.get_keys_by_values(18, 100)) == "[分数 年龄]"


def test_get_value_by_index(scores):
    assert scores.get_value_by_index(0) == 18


def test_get_values_by_indexes(scores):
    assert str(scores.get_values_by_indexes(0, 1)) == "[18 100]"


def test_get_value_by_key(scores):
    assert scores.get_value_by_key("分数") == 18
    assert scores.get_value_by_key("missing") is None


def test_get_values_by_keys(scores):
    assert str(scores.get_values_by_keys("分数", "年龄")) == "[18 100]"


def test_get_index_by_key(scores):
    assert scores.get_index_by_key("分数") == 0
    assert scores.get_index_by_key("missing") == -1


def test_get_indexes_by_keys(scores):
    assert str(scores.get_indexes_by_keys("分数", "年龄")) == "[0 1]"


def test_get_index_by_value(scores):
    assert scores.get_index_by_value(18) == 0
    assert scores.get_index_by_value(7) == -1


def test_get_indexes_by_values(scores):
    assert str(scores.get_indexes_by_values(18, 100)) == "[0 1]"


def test_len(scores):
    assert len(scores) == 2


def test_is_empty(scores):
    assert scores.is_empty() is False
    assert AnyDict().is_empty() is True


def test_copy(scores):
    d2 = scores.copy()
    assert d2 == scores
    d2.set("x", 1)
    assert len(scores) == 2


def test_keys(scores):
    assert str(scores.keys()) == "[分数 年龄]"


def test_values(scores):
    assert str(scores.values()) == "[18 100]"


def test_indexes(scores):
    assert str(scores.indexes()) == "[0 1]"


def test_first_and_last(scores):
    assert scores.first_key() == "分数"
    assert scores.first_value() == 18
    assert scores.last_key() == "年龄"
    assert scores.last_value() == 100


def test_first_key_of_empty_raises():
    with pytest.raises(IndexError):
        AnyDict().first_key()


def test_filter(scores):
    scores.filter(lambda key, value: value > 18)
    assert str(scores.values()) == "[100]"


def test_remove_by_key(scores):
    scores.remove_by_key("分数")
    assert str(scores.keys()) == "[年龄]"


def test_remove_by_value(with_zero):
    with_zero.remove_by_value(0).remove_by_value(100)
    assert str(with_zero.values()) == "[18]"


def test_remove_empty(texts):
    texts.remove_empty()
    assert str(texts.values()) == "[18 100]"


def test_len_without_empty(texts):
    assert texts.len_without_empty() == 2
    assert len(texts) == 3


def test_join(texts):
    assert texts.join(";") == "18;100;"


def test_join_default_separator(texts):
    assert texts.join() == "18 100 "


def test_join_without_empty(texts):
    assert texts.join_without_empty(";") == "18;100"
    assert len(texts) == 3


def test_in_keys(texts):
    assert texts.in_keys("分数", "年龄") is True
    assert texts.not_in_keys("分数", "missing") is True


def test_in_values(texts):
    assert texts.in_values("18", "100") is True
    assert texts.not_in_values("nope") is True


def test_has_checks(scores):
    assert scores.has_key("分数") is True
    assert scores.has_keys("分数", "nope") is False
    assert scores.has_value(100) is True
    assert scores.has_values(18, 100) is True
    assert scores.has_index(1) is True
    assert scores.has_index(2) is False
    assert scores.has_indexes(0, 1) is True
    assert scores.has_indexes(0, 9) is False


def test_every(with_zero):
    with_zero.every(lambda key, value: (key, value + 1))
    assert str(with_zero.values()) == "[19 101 1]"


def test_each(with_zero):
    seen = []
    with_zero.each(lambda key, value: seen.append((key, value)))
    assert seen == [("分数", 18), ("年龄", 100), ("税务", 0)]


def test_clean(with_zero):
    with_zero.clean()
    assert str(with_zero.values()) == "[]"
    assert len(with_zero) == 0


def test_to_json(with_zero):
    assert with_zero.to_json() == '{"分数":18,"年龄":100,"税务":0}'


def test_to_json_round_trip(with_zero):
    assert json.loads(with_zero.to_json()) == with_zero.to_dict()


def test_from_json_list_of_objects():
    raw = json.loads('[{"分数":18,"年龄":100,"税务":0}]')
    dicts = [AnyDict.from_json(json.dumps(item)) for item in raw]
    assert len(dicts) == 1
    assert dicts[0].to_dict() == {"分数": 18, "年龄": 100, "税务": 0}


def test_load_json_merges():
    d = AnyDict().set("a", 1)
    d.load_json('{"b": 2}')
    assert d.to_dict() == {"a": 1, "b": 2}


def test_load_json_rejects_array():
    with pytest.raises(ValueError):
        AnyDict().load_json("[1, 2]")


def test_str_sorted(scores):
    assert str(AnyDict().set("b", 2).set("a", 1)) == "map[a:1 b:2]"


def test_to_orderly_items(scores):
    assert scores.to_orderly_items() == [AnyOrderlyItem("分数", 18), AnyOrderlyItem("年龄", 100)]


def test_get_returns_found_flag(scores):
    assert scores.get("分数") == (18, True)
    assert scores.get("missing") == (None, False)


def test_set_existing_key_keeps_position(scores):
    scores.set("分数", 50)
    assert str(scores.keys()) == "[分数 年龄]"
    assert scores.first_value() == 50


def test_cast(scores):
    result = cast(scores, lambda key, value: f"{key}={value}")
    assert result.to_dict() == {"分数": "分数=18", "年龄": "年龄=100"}
    assert scores.get_value_by_key("分数") == 18


def test_zip_dict():
    d = zip_dict(["a", "b"], [1, 2])
    assert d.to_dict() == {"a": 1, "b": 2}
    assert d.keys() == AnyArray(["a", "b"])


def test_zip_dict_too_few_values():
    with pytest.raises(ValueError):
        zip_dict(["a", "b"], [1])