import pytest

from lstypes import UnknownMethodError, capabilities, codec, proposed, requests


def test_inline_completion_request():
    request = proposed.get_request("textDocument/inlineCompletion")
    params = request.decode_params(
        {
            "textDocument": {"uri": "file:///a.py"},
            "position": {"line": 3, "character": 7},
            "context": {
                "triggerKind": 2,
                "selectedCompletionInfo": {
                    "range": {"start": {"line": 3, "character": 4}, "end": {"line": 3, "character": 7}},
                    "text": "print",
                },
            },
        }
    )
    assert params.context.triggerKind is proposed.InlineCompletionTriggerKind.AUTOMATIC
    assert params.context.selectedCompletionInfo.text == "print"

    result = request.decode_result(
        [{"insertText": "print()"}, {"insertText": {"kind": "snippet", "value": "print($1)"}}]
    )
    assert result[0].insertText == "print()"
    assert isinstance(result[1].insertText, proposed.StringValue)
    assert request.encode_result(result) == [
        {"insertText": "print()"},
        {"insertText": {"kind": "snippet", "value": "print($1)"}},
    ]

    listing = request.decode_result({"items": []})
    assert isinstance(listing, proposed.InlineCompletionList)


def test_stable_registry_has_no_draft_methods():
    assert "textDocument/inlineCompletion" not in requests.REQUESTS
    assert requests.get_request("initialize").params is capabilities.InitializeParams
    with pytest.raises(UnknownMethodError):
        requests.get_request("textDocument/inlineCompletion")


def test_proposed_registry_extends_stable_one():
    assert set(requests.REQUESTS) < set(proposed.REQUESTS)
    assert proposed.get_request("textDocument/hover") is requests.HOVER
    assert proposed.get_request("initialize") is proposed.INITIALIZE


def test_offset_encoding_handshake():
    params = proposed.INITIALIZE.decode_params(
        {
            "processId": None,
            "rootUri": None,
            "capabilities": {
                "offsetEncoding": ["utf-8", "utf-16"],
                "textDocument": {"inlineCompletion": {"dynamicRegistration": True}},
            },
        }
    )
    assert params.capabilities.offsetEncoding == ["utf-8", "utf-16"]
    assert params.capabilities.textDocument.inlineCompletion.dynamicRegistration is True

    result = proposed.INITIALIZE.decode_result(
        {"capabilities": {"inlineCompletionProvider": True}, "offsetEncoding": "utf-8"}
    )
    assert result.offsetEncoding == "utf-8"
    assert codec.encode(result) == {
        "capabilities": {"inlineCompletionProvider": True},
        "offsetEncoding": "utf-8",
    }


def test_stable_handshake_drops_draft_fields():
    params = requests.INITIALIZE.decode_params(
        {"capabilities": {"offsetEncoding": ["utf-8"], "textDocument": {"inlineCompletion": {}}}}
    )
    assert codec.encode(params) == {"processId": None, "rootUri": None, "capabilities": {"textDocument": {}}}
