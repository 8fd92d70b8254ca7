import json

import pytest

from utok.config import ModelConfig, TokenizerConfig
from utok.tokenization.io import load_tokenizer, save_tokenizer
from utok.tokenization.tokenizer import UnigramTokenizer

VOCAB = [["<pad>", 0.0], ["</s>", 0.0], ["<unk>", 0.0], ["▁hi", -0.5], ["▁there", -0.75]]


def test_save_load(tmp_path):
    model_config = ModelConfig(type="Unigram", unk_id=2, vocab=VOCAB)
    config = TokenizerConfig(eos_token="</s>", pad_token="<pad>")
    paths = save_tokenizer(tmp_path, model_config, config, metadata={"name": "test"})
    assert [path.name for path in paths] == ["tokenizer.json", "tokenizer_config.json", "manifest.json"]

    loaded_model, loaded_config, manifest = load_tokenizer(tmp_path)
    assert loaded_model.vocab == model_config.vocab
    assert loaded_model.unk_id == 2
    assert loaded_config == config
    assert set(manifest["files"]) == {"tokenizer.json", "tokenizer_config.json"}
    assert manifest["metadata"] == {"name": "test"}


def test_pretrained_roundtrip(tmp_path):
    tokenizer = UnigramTokenizer(
        ModelConfig(type="Unigram", unk_id=2, vocab=VOCAB),
        TokenizerConfig(eos_token="</s>"),
    )
    tokenizer.save_pretrained(tmp_path)
    loaded = UnigramTokenizer.from_pretrained(tmp_path)
    assert loaded.encode("▁hi▁thereq") == tokenizer.encode("▁hi▁thereq") == [3, 4, 2]
    assert loaded.get_vocab() == tokenizer.get_vocab()


def test_load_hand_written_artifact(tmp_path):
    (tmp_path / "tokenizer.json").write_text(
        json.dumps({"version": "1.0", "model": {"type": "Unigram", "unk_id": 2, "vocab": VOCAB, "byte_fallback": False}}),
        encoding="utf-8",
    )
    (tmp_path / "tokenizer_config.json").write_text(
        json.dumps({"tokenizer_class": "T5Tokenizer", "eos_token": {"content": "</s>"}, "unk_token": "<unk>"}),
        encoding="utf-8",
    )
    tokenizer = UnigramTokenizer.from_pretrained(tmp_path)
    assert tokenizer.tokenize("▁hi▁there") == ["▁hi", "▁there"]
    assert tokenizer.decode([3, 4, 1]) == "hi there"


def test_from_pretrained_overrides(tmp_path):
    UnigramTokenizer(
        ModelConfig(type="Unigram", unk_id=2, vocab=VOCAB),
        TokenizerConfig(eos_token="</s>"),
    ).save_pretrained(tmp_path)
    loaded = UnigramTokenizer.from_pretrained(tmp_path, clean_up_tokenization_spaces=False)
    assert loaded.decode([3, 4]) == "▁hi▁there"


def test_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tokenizer(tmp_path)
    (tmp_path / "tokenizer.json").write_text("{}", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        load_tokenizer(tmp_path)


def test_non_unigram_artifact_is_rejected(tmp_path):
    (tmp_path / "tokenizer.json").write_text(
        json.dumps({"model": {"type": "BPE", "vocab": {"a": 0}, "merges": []}}),
        encoding="utf-8",
    )
    (tmp_path / "tokenizer_config.json").write_text(json.dumps({"eos_token": "</s>"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_tokenizer(tmp_path)
