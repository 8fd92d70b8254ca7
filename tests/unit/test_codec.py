from utok.tokenization.codec import TokenCodec
from utok.tokenization.vocab import VocabTable

PAIRS = [
    ("<pad>", 0.0),
    ("</s>", 0.0),
    ("<unk>", 0.0),
    ("▁hello", -1.0),
    ("▁world", -1.0),
    ("!", -2.0),
]


def _codec(**kwargs):
    return TokenCodec(VocabTable.from_pairs(PAIRS), 2, skip_tokens=("<unk>", "<pad>", "</s>", None), **kwargs)


def test_token_lookup_misses_resolve_to_unknown():
    codec = _codec()
    assert codec.tokens_to_ids(["▁hello", "nope", "!"]) == [3, 2, 5]


def test_id_lookup_misses_resolve_to_unknown_piece():
    codec = _codec()
    assert codec.ids_to_tokens([4, 99, -1]) == ["▁world", "<unk>", "<unk>"]


def test_decode_drops_special_pieces_and_restores_spaces():
    codec = _codec()
    assert codec.decode([0, 3, 2, 4, 5, 1]) == "hello world!"
    assert codec.decode([]) == ""


def test_decode_without_cleanup_keeps_markers():
    codec = _codec(clean_up_tokenization_spaces=False)
    assert codec.decode([3, 4, 1]) == "▁hello▁world"


def test_duplicate_pieces_resolve_to_last_id():
    table = VocabTable.from_pairs([("a", 0.0), ("a", -1.0), ("<unk>", 0.0)])
    codec = TokenCodec(table, 2)
    assert codec.token_to_id("a") == 1
    assert codec.ids_to_tokens([0, 1]) == ["a", "a"]
