from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

import tgwire.codec as codec_module
from tgwire.codec import (
    DATETIME,
    FILE,
    INT,
    STR,
    UNSET,
    ListOf,
    ObjectOf,
    VariantOf,
    decode,
    decode_json,
    dumps,
    encode,
    is_set,
    loads,
    optional,
    required,
    schema_for,
)
from tgwire.errors import (
    EncodeError,
    MalformedPayloadError,
    MissingRequiredFieldError,
    TypeMismatchError,
)
from tgwire.files import InputFileId, InputFileStream, InputFileUrl
from tgwire.methods import SendPhoto
from tgwire.types import (
    ChatBoost,
    ChatBoostSource,
    ChatBoostSourceGiveaway,
    ChatBoostSourcePremium,
    FileMeta,
    Message,
    PhotoSize,
    User,
    Video,
)


def test_required_field_missing_reports_path() -> None:
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        decode(User, {"id": 1, "is_bot": False})

    assert excinfo.value.field == "first_name"
    assert excinfo.value.path == "$.first_name"


def test_required_field_missing_deep_in_tree() -> None:
    raw = {
        "boost_id": "b1",
        "add_date": 1700000000,
        "expiration_date": 1702592000,
        "source": {"source": "premium", "user": {"id": 1, "is_bot": False}},
    }

    with pytest.raises(MissingRequiredFieldError) as excinfo:
        decode(ChatBoost, raw)

    assert excinfo.value.path == "$.source.user.first_name"


def test_type_mismatch_on_scalar() -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        decode(User, {"id": "1", "is_bot": False, "first_name": "Ada"})
    assert excinfo.value.path == "$.id"

    with pytest.raises(TypeMismatchError):
        decode(User, {"id": True, "is_bot": False, "first_name": "Ada"})


def test_null_for_required_field_is_a_type_mismatch() -> None:
    with pytest.raises(TypeMismatchError):
        decode(User, {"id": 1, "is_bot": False, "first_name": None})


def test_absent_and_null_optional_fields_stay_distinct() -> None:
    absent = decode(ChatBoostSource, {"source": "giveaway", "giveaway_message_id": 7})
    null = decode(
        ChatBoostSource,
        {"source": "giveaway", "giveaway_message_id": 7, "user": None},
    )

    assert absent.user is UNSET
    assert not is_set(absent.user)
    assert null.user is None
    assert is_set(null.user)
    assert absent != null
    assert "user" not in encode(absent)
    assert encode(null)["user"] is None


def test_falsy_values_are_not_treated_as_absent() -> None:
    giveaway = ChatBoostSourceGiveaway(giveaway_message_id=0, is_unclaimed=False)

    assert encode(giveaway) == {
        "source": "giveaway",
        "giveaway_message_id": 0,
        "is_unclaimed": False,
    }


def test_unknown_fields_are_ignored() -> None:
    user = decode(
        User,
        {"id": 1, "is_bot": True, "first_name": "Bot", "has_main_web_app": True},
    )

    assert user == User(id=1, is_bot=True, first_name="Bot")


def test_datetime_is_unix_seconds_in_utc() -> None:
    boost = decode(
        ChatBoost,
        {
            "boost_id": "b1",
            "add_date": 1700000000,
            "expiration_date": 1702592000,
            "source": {"source": "gift_code", "user": {"id": 3, "is_bot": False, "first_name": "C"}},
        },
    )

    assert boost.add_date == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert encode(boost)["add_date"] == 1700000000


def test_naive_datetime_is_encoded_as_utc() -> None:
    assert DATETIME.encode(datetime(2023, 11, 14, 22, 13, 20), None, "$") == 1700000000


def test_embedded_file_meta_is_flattened() -> None:
    raw = {"file_id": "AgAD", "file_unique_id": "uniq", "file_size": 1024, "width": 90, "height": 60}

    photo = decode(PhotoSize, raw)

    assert photo.file == FileMeta(file_id="AgAD", file_unique_id="uniq", file_size=1024)
    assert photo.width == 90
    assert encode(photo) == raw


def test_embedded_file_meta_missing_field() -> None:
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        decode(Video, {"file_unique_id": "u", "width": 1, "height": 1, "duration": 3})

    assert excinfo.value.path == "$.file_id"


@pytest.mark.timeout(5)
def test_embedded_schema_compiles_from_a_cold_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(codec_module, "_schemas", {})

    photo = decode(PhotoSize, {"file_id": "f", "file_unique_id": "u", "width": 1, "height": 1})

    assert photo.file == FileMeta(file_id="f", file_unique_id="u")
    assert codec_module._schemas[FileMeta] is schema_for(FileMeta)


def test_datetime_with_microseconds_is_rejected() -> None:
    boost = ChatBoost(
        boost_id="b1",
        add_date=datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc),
        expiration_date=datetime(2024, 2, 1, tzinfo=timezone.utc),
        source=ChatBoostSourcePremium(user=User(id=3, is_bot=False, first_name="C")),
    )

    with pytest.raises(EncodeError) as excinfo:
        encode(boost)

    assert excinfo.value.path == "$.add_date"


def test_whole_second_datetimes_round_trip() -> None:
    boost = ChatBoost(
        boost_id="b1",
        add_date=datetime(2024, 1, 1, 12, 30, 5, tzinfo=timezone.utc),
        expiration_date=datetime(2024, 2, 1, tzinfo=timezone.utc),
        source=ChatBoostSourcePremium(user=User(id=3, is_bot=False, first_name="C")),
    )

    assert decode(ChatBoost, encode(boost)) == boost


def test_keyword_field_uses_wire_name(telegram_user: dict, private_chat: dict) -> None:
    raw = {"message_id": 1, "date": 1700000000, "chat": private_chat, "from": telegram_user, "text": "hi"}

    message = decode(Message, raw)

    assert message.from_user.first_name == "Ada"
    assert encode(message)["from"] == telegram_user


def test_list_codec_decodes_each_item() -> None:
    users = decode(
        ListOf(ObjectOf(User)),
        [
            {"id": 1, "is_bot": False, "first_name": "A"},
            {"id": 2, "is_bot": True, "first_name": "B"},
        ],
    )

    assert [user.id for user in users] == [1, 2]


def test_list_item_error_reports_index() -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        decode(ListOf(INT), [1, 2, "three"])

    assert excinfo.value.path == "$[2]"


def test_polymorphic_list_keeps_variant_order() -> None:
    raw = [
        {"source": "premium", "user": {"id": 1, "is_bot": False, "first_name": "A"}},
        {"source": "giveaway", "giveaway_message_id": 12},
    ]

    sources = decode(ListOf(VariantOf(ChatBoostSource)), raw)

    assert [type(item) for item in sources] == [
        ChatBoostSourcePremium,
        ChatBoostSourceGiveaway,
    ]
    assert encode(sources) == raw


def test_file_reference_decoding() -> None:
    assert FILE.decode("https://example.com/cat.jpg", "$") == InputFileUrl(
        "https://example.com/cat.jpg"
    )
    assert FILE.decode("AgACAgIAAxkBAAIB", "$") == InputFileId("AgACAgIAAxkBAAIB")
    with pytest.raises(TypeMismatchError):
        FILE.decode("attach://photo_0", "$")


def test_inline_file_references_encode_without_a_request() -> None:
    request = SendPhoto(chat_id="@channel", photo=InputFileId("AgAC"), caption="hi")

    assert encode(request) == {"chat_id": "@channel", "photo": "AgAC", "caption": "hi"}


def test_stream_outside_a_request_is_rejected() -> None:
    request = SendPhoto(chat_id=1, photo=InputFileStream(b"bytes"))

    with pytest.raises(EncodeError) as excinfo:
        encode(request)

    assert excinfo.value.path == "$.photo"


def test_unset_required_field_cannot_be_encoded() -> None:
    with pytest.raises(EncodeError):
        encode(User(id=1, is_bot=False, first_name=UNSET))


def test_wrong_python_type_is_an_encode_error() -> None:
    with pytest.raises(EncodeError):
        encode(User(id="1", is_bot=False, first_name="Ada"))


def test_schema_is_compiled_once() -> None:
    assert schema_for(User) is schema_for(User)
    assert [binding.wire_name for binding in schema_for(Message)][:4] == [
        "message_id",
        "date",
        "chat",
        "from",
    ]


def test_duplicate_wire_names_are_rejected() -> None:
    @dataclass(frozen=True, kw_only=True)
    class Twice:
        first: str = required(STR, name="value")
        second: str = optional(STR, name="value")

    with pytest.raises(TypeError):
        schema_for(Twice)


def test_json_helpers() -> None:
    assert dumps({"emoji": "🎲", "n": 1}) == '{"emoji":"🎲","n":1}'
    assert loads(b'{"a": 1}') == {"a": 1}
    assert decode_json(User, '{"id":1,"is_bot":false,"first_name":"A"}').id == 1
    with pytest.raises(MalformedPayloadError):
        loads("{not json")
