import uuid

from cadcore.writer import Writer


def test_new_writer_is_empty_and_valid():
    writer = Writer()
    assert writer.to_string() == ""
    assert writer.is_valid()


def test_map_layout():
    writer = Writer()
    writer.begin_map()
    for key, value in (("a", "1"), ("b", "2")):
        writer.begin_map_key()
        writer.write_raw_string(key)
        writer.begin_map_value()
        writer.write_raw_string(value)
    writer.end_map()
    assert writer.to_string() == "{a:1,b:2}"
    assert writer.is_valid()


def test_list_layout():
    writer = Writer()
    writer.begin_list()
    for item in ("x", "y", "z"):
        writer.begin_list_value()
        writer.write_raw_string(item)
    writer.end_list()
    assert writer.to_string() == "[x,y,z]"
    assert writer.is_valid()


def test_open_block_is_invalid():
    writer = Writer()
    writer.begin_list()
    assert not writer.is_valid()
    writer.end_list()
    assert writer.is_valid()


def test_key_without_value_is_invalid():
    writer = Writer()
    writer.begin_map()
    writer.begin_map_key()
    writer.write_raw_string("k")
    writer.end_map()
    assert not writer.is_valid()


def test_value_string_escapes_every_structural_char():
    writer = Writer()
    special = "\"'\\{}:,"
    writer.write_value_string(special)
    text = writer.to_string()
    assert len(text) == 2 * len(special)
    assert text[::2] == "\\" * len(special)
    assert text[1::2] == special


def test_value_string_leaves_plain_text():
    writer = Writer()
    writer.write_value_string("plain text-1")
    assert writer.to_string() == "plain text-1"


def test_quoted_string_escapes_quotes_and_backslash_only():
    writer = Writer()
    writer.write_quoted_string('a"b\\c:d')
    assert writer.to_string() == '"a\\"b\\\\c:d"'


def test_null_reference():
    writer = Writer()
    assert writer.write_instance_reference(None, uuid.uuid4()) is True
    assert writer.to_string() == "?null"


def test_instance_reference_first_then_repeat():
    writer = Writer()
    guid = uuid.uuid4()
    instance = object()
    assert writer.write_instance_reference(instance, guid) is False
    assert writer.to_string() == ""
    assert writer.write_instance_reference(instance, guid) is True
    assert writer.to_string() == "?" + str(guid)


def test_instance_reference_with_null_guid():
    writer = Writer()
    assert writer.write_instance_reference(object(), uuid.UUID(int=0)) is False
    assert writer.write_instance_reference(object(), None) is False
    assert writer.to_string() == ""


def test_write_char():
    writer = Writer()
    writer.write_char("?")
    writer.write_raw_string("abc")
    assert str(writer) == "?abc"