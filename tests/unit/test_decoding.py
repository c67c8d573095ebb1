from __future__ import annotations

import gzip
import json

import pytest

from tvmaze_client.core.decoding import ResponseCodec, ResponseDecoder, Shape
from tvmaze_client.core.errors import TvMazeDecodeError
from tvmaze_client.models import Show
from tvmaze_client.parser import parse_episode, parse_image, parse_show
from tests.shared.payloads import make_episode_payload, make_show_payload
from tests.shared.transport import gzip_json

CODEC = ResponseCodec()


def test_decodes_single_object():
    show = CODEC.decode(ResponseDecoder.object_of(parse_show), gzip_json(make_show_payload(42)))
    assert isinstance(show, Show)
    assert show.id == 42


def test_decodes_list_in_order():
    body = gzip_json([make_episode_payload(1), make_episode_payload(2)])
    episodes = CODEC.decode(ResponseDecoder.list_of(parse_episode), body)
    assert [episode.id for episode in episodes] == [1, 2]


def test_decodes_updates_map_with_integer_keys():
    body = gzip_json({"1": 1704794065, "250": 1704794000})
    assert CODEC.decode(ResponseDecoder.id_map(), body) == {1: 1704794065, 250: 1704794000}


def test_decoder_factories_set_shape():
    assert ResponseDecoder.object_of(parse_show).shape is Shape.OBJECT
    assert ResponseDecoder.list_of(parse_show).shape is Shape.LIST
    assert ResponseDecoder.id_map().shape is Shape.ID_MAP


def test_null_optional_fields_pass_through():
    payload = make_show_payload(1, network=None, premiered=None, rating=None, schedule=None)
    show = CODEC.decode(ResponseDecoder.object_of(parse_show), gzip_json(payload))
    assert show.network is None
    assert show.premiered is None
    assert show.rating is None


def test_invalid_json_is_decode_error_with_cause():
    with pytest.raises(TvMazeDecodeError) as exc_info:
        CODEC.decode(ResponseDecoder.object_of(parse_show), gzip.compress(b"{not json"))
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_uncompressed_body_is_decode_error():
    body = json.dumps(make_show_payload()).encode("utf-8")
    with pytest.raises(TvMazeDecodeError) as exc_info:
        CODEC.decode(ResponseDecoder.object_of(parse_show), body)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_deeply_nested_json_is_decode_error():
    with pytest.raises(TvMazeDecodeError) as exc_info:
        CODEC.decode(ResponseDecoder.list_of(parse_show), gzip.compress(b"[" * 200_000))
    assert isinstance(exc_info.value.__cause__, RecursionError)


@pytest.mark.parametrize(
    ("decoder", "payload"),
    [
        (ResponseDecoder.object_of(parse_show), [make_show_payload()]),
        (ResponseDecoder.list_of(parse_show), make_show_payload()),
        (ResponseDecoder.list_of(parse_show), [1, 2]),
        (ResponseDecoder.object_of(parse_show), {"name": "no id"}),
        (ResponseDecoder.object_of(parse_show), make_show_payload(id="42")),
        (ResponseDecoder.object_of(parse_show), make_show_payload(premiered="24/06/2013")),
        (ResponseDecoder.object_of(parse_show), make_show_payload(name={"x": 1})),
        (ResponseDecoder.object_of(parse_show), make_show_payload(genres=["Drama", 3])),
        (ResponseDecoder.list_of(parse_image), [{"id": 1, "main": "false"}]),
        (ResponseDecoder.id_map(), [1, 2]),
        (ResponseDecoder.id_map(), {"abc": 1}),
        (ResponseDecoder.id_map(), {"1": "soon"}),
    ],
    ids=[
        "object-got-list",
        "list-got-object",
        "list-of-scalars",
        "missing-id",
        "string-id",
        "bad-date",
        "object-as-name",
        "non-string-genre",
        "string-as-bool",
        "map-got-list",
        "map-bad-key",
        "map-bad-value",
    ],
)
def test_nonconforming_payload_is_decode_error(decoder, payload):
    with pytest.raises(TvMazeDecodeError):
        CODEC.decode(decoder, gzip_json(payload))


def test_codec_uses_injected_loader():
    calls = []

    def loads(raw):
        calls.append(raw)
        return json.loads(raw)

    codec = ResponseCodec(loads=loads)
    codec.decode(ResponseDecoder.id_map(), gzip_json({"1": 2}))
    assert calls == [b'{"1": 2}']
