import json

import pytest

from lstypes import DecodeError, ErrorKind, Position, Range, SymbolKind, Uri, lsif


def test_every_line_round_trips(lsif_lines):
    for line in lsif_lines:
        entry = lsif.decode_entry(line)
        assert json.loads(lsif.encode_entry(entry)) == json.loads(line), line


def test_entries_decode_to_their_records(lsif_lines):
    entries = list(lsif.iter_entries(lsif_lines))
    assert len(entries) == 33
    by_id = {entry.id: entry for entry in entries}

    metadata = by_id[1]
    assert isinstance(metadata, lsif.MetaData)
    assert metadata.projectRoot == Uri("file:///home/dev/project")
    assert metadata.positionEncoding is lsif.Encoding.UTF16
    assert metadata.toolInfo.args == ["-p", "tsconfig.json"]

    assert isinstance(by_id[3], lsif.Event)
    assert by_id[3].kind is lsif.EventKind.BEGIN
    assert by_id[3].scope is lsif.EventScope.PROJECT
    assert isinstance(by_id[7], lsif.MonikerVertex)
    assert isinstance(by_id[8], lsif.MonikerEdge)
    assert isinstance(by_id[9], lsif.PackageInformation)
    assert isinstance(by_id[10], lsif.PackageInformationEdge)

    definition = by_id[11]
    assert isinstance(definition, lsif.RangeVertex)
    assert isinstance(definition.tag, lsif.DefinitionTag)
    assert definition.tag.kind is SymbolKind.FUNCTION
    assert definition.as_range() == Range(
        start=Position(line=0, character=16), end=Position(line=0, character=21)
    )
    assert isinstance(by_id[18].tag, lsif.ReferenceTag)

    assert isinstance(by_id[13], lsif.HoverResult)
    assert isinstance(by_id[14], lsif.HoverEdge)
    assert isinstance(by_id[17], lsif.ItemEdge)
    assert by_id[17].property is None
    assert by_id[22].property is lsif.ItemKind.DEFINITIONS
    assert isinstance(by_id[26].result[0], lsif.RangeBasedDocumentSymbol)
    assert isinstance(by_id[29], lsif.DiagnosticEdge)
    assert isinstance(by_id[32], lsif.ContainsEdge)
    assert by_id[32].inVs == [4]


def test_metadata_requires_position_encoding():
    with pytest.raises(DecodeError) as info:
        lsif.decode_entry('{"id":1,"type":"vertex","label":"metaData","version":"0.6.0","projectRoot":"file:///p"}')
    assert info.value.kind is ErrorKind.MISSING_FIELD
    assert info.value.path == "$.positionEncoding"


def test_string_ids():
    entry = lsif.decode_entry('{"id":"e1","type":"edge","label":"next","outV":"v1","inV":"v2"}')
    assert isinstance(entry, lsif.NextEdge)
    assert (entry.id, entry.outV, entry.inV) == ("e1", "v1", "v2")
    assert json.loads(lsif.encode_entry(entry)) == {
        "id": "e1",
        "type": "edge",
        "label": "next",
        "outV": "v1",
        "inV": "v2",
    }


def test_document_symbol_result_with_lsp_symbols():
    line = json.dumps(
        {
            "id": 5,
            "type": "vertex",
            "label": "documentSymbolResult",
            "result": [
                {
                    "name": "greet",
                    "kind": 12,
                    "range": {"start": {"line": 0, "character": 0}, "end": {"line": 2, "character": 1}},
                    "selectionRange": {
                        "start": {"line": 0, "character": 9},
                        "end": {"line": 0, "character": 14},
                    },
                }
            ],
        }
    )
    entry = lsif.decode_entry(line)
    assert entry.result[0].name == "greet"
    assert json.loads(lsif.encode_entry(entry)) == json.loads(line)


@pytest.mark.parametrize(
    "line",
    [
        '{"id":1,"type":"vertex","label":"bogus"}',
        '{"id":1,"type":"hyperedge","label":"next","outV":1,"inV":2}',
        '{"id":1,"type":"vertex","label":"range","start":{"line":0,"character":0},'
        '"end":{"line":0,"character":1},"tag":{"type":"mystery","text":"x"}}',
    ],
)
def test_unknown_tags_are_rejected(line):
    with pytest.raises(DecodeError) as info:
        lsif.decode_entry(line)
    assert info.value.kind is ErrorKind.DISCRIMINATOR_MISMATCH


def test_iter_entries_skips_blank_lines():
    lines = ['{"id":1,"type":"vertex","label":"resultSet"}', "", "   ", '{"id":2,"type":"vertex","label":"resultSet"}']
    assert [entry.id for entry in lsif.iter_entries(lines)] == [1, 2]


def test_iter_entries_stops_at_bad_line():
    lines = ['{"id":1,"type":"vertex","label":"resultSet"}', '{"id":2,"type":"vertex"']
    entries = lsif.iter_entries(lines)
    assert next(entries).id == 1
    with pytest.raises(DecodeError):
        next(entries)


def test_dump_entries(lsif_lines):
    entries = list(lsif.iter_entries(lsif_lines))
    dumped = lsif.dump_entries(entries)
    assert dumped.endswith("\n")
    assert [json.loads(line) for line in dumped.splitlines()] == [json.loads(line) for line in lsif_lines]


def test_build_entries_in_code():
    document = lsif.Document(id=2, uri=Uri("file:///a.py"), languageId="python")
    contains = lsif.ContainsEdge(id=3, outV=1, inVs=[2])
    lines = lsif.dump_entries([document, contains]).splitlines()
    assert lines[0] == '{"id":2,"type":"vertex","label":"document","uri":"file:///a.py","languageId":"python"}'
    assert json.loads(lines[1]) == {"id": 3, "type": "edge", "label": "contains", "outV": 1, "inVs": [2]}
