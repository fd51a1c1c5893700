from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from tgwire.codec import dumps
from tgwire.enums import FileType
from tgwire.errors import AttachmentUnavailableError, DuplicateAttachmentNameError
from tgwire.files import (
    ATTACH_SCHEME,
    FileResolver,
    InputFileId,
    InputFileStream,
    InputFileUrl,
    input_file,
)
from tgwire.methods import SendDocument, SendMediaGroup, SendPhoto
from tgwire.multipart import (
    JsonPayload,
    MultipartPayload,
    build_payload,
    build_payload_async,
)
from tgwire.types import InputMediaPhoto, InputMediaVideo


def _placeholder_name(value: str) -> str:
    assert value.startswith(ATTACH_SCHEME)
    return value[len(ATTACH_SCHEME) :]


def test_photo_and_thumbnail_become_two_parts() -> None:
    request = SendPhoto(
        chat_id=42,
        photo=InputFileStream(b"photo-bytes", filename="cat.jpg"),
        thumbnail=InputFileStream(b"thumb-bytes", filename="thumb.jpg"),
        caption="cat",
    )

    payload = build_payload(request)

    assert isinstance(payload, MultipartPayload)
    assert payload.method == "sendPhoto"
    names = [attachment.name for attachment in payload.attachments]
    assert len(names) == 2
    assert len(set(names)) == 2
    assert _placeholder_name(payload.body["photo"]) == names[0]
    assert _placeholder_name(payload.body["thumbnail"]) == names[1]
    assert [a.content for a in payload.attachments] == [b"photo-bytes", b"thumb-bytes"]
    assert payload.attachments[0].mime_type == "image/jpeg"


def test_form_fields_render_one_field_per_key() -> None:
    request = SendPhoto(
        chat_id=42,
        photo=InputFileStream(b"photo-bytes", filename="cat.jpg"),
        disable_notification=True,
    )

    payload = build_payload(request)

    assert payload.form_fields() == {
        "chat_id": "42",
        "photo": "attach://photo_0",
        "disable_notification": "true",
    }
    assert payload.files() == [("photo_0", ("cat.jpg", b"photo-bytes", "image/jpeg"))]
    assert set(payload.to_httpx()) == {"data", "files"}


def test_body_part_sends_whole_body_as_one_json_part() -> None:
    request = SendPhoto(chat_id=42, photo=InputFileStream(b"x", filename="a.png"))

    payload = build_payload(request, body_part="payload_json")

    fields = payload.form_fields()
    assert list(fields) == ["payload_json"]
    assert json.loads(fields["payload_json"]) == {
        "chat_id": 42,
        "photo": "attach://photo_0",
    }


def test_media_group_names_every_stream_uniquely() -> None:
    request = SendMediaGroup(
        chat_id=42,
        media=[
            InputMediaPhoto(media=InputFileStream(b"one")),
            InputMediaPhoto(media=InputFileStream(b"two"), caption="second"),
            InputMediaVideo(media=InputFileId("BAACAgIAAx")),
        ],
    )

    payload = build_payload(request)

    assert isinstance(payload, MultipartPayload)
    media = payload.body["media"]
    assert [item["type"] for item in media] == ["photo", "photo", "video"]
    names = [_placeholder_name(item["media"]) for item in media[:2]]
    assert names == [a.name for a in payload.attachments]
    assert len(set(names)) == 2
    assert media[2]["media"] == "BAACAgIAAx"
    assert json.loads(payload.form_fields()["media"]) == media


def test_same_stream_object_is_attached_once() -> None:
    stream = InputFileStream(b"shared", filename="shared.jpg")
    request = SendPhoto(chat_id=1, photo=stream, thumbnail=stream)

    payload = build_payload(request)

    assert len(payload.attachments) == 1
    assert payload.body["photo"] == payload.body["thumbnail"]


def test_explicit_attach_name_is_used() -> None:
    request = SendPhoto(
        chat_id=1, photo=InputFileStream(b"x", filename="c.jpg", attach_name="cover")
    )

    payload = build_payload(request)

    assert payload.body["photo"] == "attach://cover"
    assert payload.attachments[0].name == "cover"


def test_colliding_attach_names_are_rejected() -> None:
    request = SendPhoto(
        chat_id=1,
        photo=InputFileStream(b"x", attach_name="cover"),
        thumbnail=InputFileStream(b"y", attach_name="cover"),
    )

    with pytest.raises(DuplicateAttachmentNameError) as excinfo:
        build_payload(request)

    assert excinfo.value.name == "cover"


def test_generated_name_skips_explicit_names() -> None:
    request = SendPhoto(
        chat_id=1,
        photo=InputFileStream(b"a", attach_name="thumbnail_1"),
        thumbnail=InputFileStream(b"b"),
    )

    payload = build_payload(request)

    names = [attachment.name for attachment in payload.attachments]
    assert names[0] == "thumbnail_1"
    assert names[1] != "thumbnail_1"
    assert payload.body["thumbnail"] == ATTACH_SCHEME + names[1]


def test_generated_name_skips_explicit_name_met_later() -> None:
    request = SendPhoto(
        chat_id=1,
        photo=InputFileStream(b"a"),
        thumbnail=InputFileStream(b"b", attach_name="photo_0"),
    )

    payload = build_payload(request)

    names = [attachment.name for attachment in payload.attachments]
    assert names[1] == "photo_0"
    assert len(set(names)) == 2


def test_attach_name_cannot_shadow_a_form_field() -> None:
    request = SendPhoto(
        chat_id=1, caption="hi", photo=InputFileStream(b"a", attach_name="caption")
    )

    with pytest.raises(DuplicateAttachmentNameError) as excinfo:
        build_payload(request)

    assert excinfo.value.name == "caption"
    assert excinfo.value.path == "$.photo"


def test_attach_name_cannot_shadow_the_body_part() -> None:
    request = SendPhoto(
        chat_id=1, photo=InputFileStream(b"a", attach_name="payload_json")
    )

    with pytest.raises(DuplicateAttachmentNameError):
        build_payload(request, body_part="payload_json")


def test_attach_name_may_match_a_key_inside_the_body_part() -> None:
    request = SendPhoto(
        chat_id=1, caption="hi", photo=InputFileStream(b"a", attach_name="caption")
    )

    payload = build_payload(request, body_part="payload_json")

    assert payload.files()[0][0] == "caption"
    assert list(payload.form_fields()) == ["payload_json"]


def test_form_fields_leave_out_explicit_nulls() -> None:
    request = SendPhoto(chat_id=1, caption=None, photo=InputFileStream(b"a"))

    payload = build_payload(request)

    assert payload.body["caption"] is None
    assert "caption" not in payload.form_fields()
    json_payload = build_payload(SendPhoto(chat_id=1, caption=None, photo=InputFileId("AgAC")))
    assert json_payload.to_httpx()["json"]["caption"] is None


def test_requests_without_streams_stay_json() -> None:
    request = SendPhoto(chat_id=1, photo=InputFileUrl("https://example.com/cat.jpg"))

    payload = build_payload(request)

    assert isinstance(payload, JsonPayload)
    assert not payload.is_multipart
    assert payload.to_httpx() == {
        "json": {"chat_id": 1, "photo": "https://example.com/cat.jpg"}
    }


def test_missing_file_is_reported_as_unavailable(tmp_path: Path) -> None:
    request = SendDocument(chat_id=1, document=InputFileStream(tmp_path / "missing.pdf"))

    with pytest.raises(AttachmentUnavailableError) as excinfo:
        build_payload(request)

    assert excinfo.value.name == "document_0"
    assert excinfo.value.path == "$.document"


def test_exhausted_stream_is_reported_as_unavailable() -> None:
    handle = io.BytesIO(b"")
    request = SendDocument(chat_id=1, document=InputFileStream(handle))

    with pytest.raises(AttachmentUnavailableError):
        build_payload(request)


def test_text_stream_is_rejected() -> None:
    request = SendDocument(chat_id=1, document=InputFileStream(io.StringIO("text")))

    with pytest.raises(AttachmentUnavailableError):
        build_payload(request)


def test_path_stream_uses_file_name_and_type(tmp_path: Path) -> None:
    report = tmp_path / "report.pdf"
    report.write_bytes(b"%PDF-1.4")
    request = SendDocument(chat_id=1, document=InputFileStream(report))

    payload = build_payload(request)

    attachment = payload.attachments[0]
    assert attachment.filename == "report.pdf"
    assert attachment.mime_type == "application/pdf"
    assert attachment.content == b"%PDF-1.4"


def test_unnamed_bytes_fall_back_to_part_name() -> None:
    request = SendDocument(chat_id=1, document=InputFileStream(b"\x00\x01"))

    attachment = build_payload(request).attachments[0]

    assert attachment.filename == "document_0"
    assert attachment.mime_type == "application/octet-stream"


@pytest.mark.anyio
async def test_async_builder_reads_files(tmp_path: Path) -> None:
    image = tmp_path / "cat.png"
    image.write_bytes(b"png-bytes")
    request = SendPhoto(chat_id=42, photo=InputFileStream(image))

    payload = await build_payload_async(request, body_part="payload_json")

    assert isinstance(payload, MultipartPayload)
    assert payload.attachments[0].content == b"png-bytes"
    assert payload.form_fields() == {
        "payload_json": dumps({"chat_id": 42, "photo": "attach://photo_0"})
    }


def test_resolver_classifies_references() -> None:
    resolver = FileResolver()

    assert resolver.classify(InputFileId("a")) is FileType.ID
    assert resolver.classify(InputFileUrl("https://x")) is FileType.URL
    assert resolver.classify(InputFileStream(b"")) is FileType.STREAM
    assert resolver.resolve(InputFileId("a"), "$.photo") == "a"
    assert not resolver.needs_multipart


def test_input_file_coercion(tmp_path: Path) -> None:
    assert input_file("https://example.com/a.jpg") == InputFileUrl("https://example.com/a.jpg")
    assert input_file("AgAC") == InputFileId("AgAC")
    assert isinstance(input_file(b"raw"), InputFileStream)
    assert isinstance(input_file(tmp_path / "a.jpg"), InputFileStream)
