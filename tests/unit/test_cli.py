import json

import pytest

from utok.cli.main import main
from utok.config import ModelConfig, TokenizerConfig
from utok.tokenization.tokenizer import UnigramTokenizer


@pytest.fixture()
def artifact(tmp_path):
    tokenizer = UnigramTokenizer(
        ModelConfig(type="Unigram", unk_id=2, vocab=[["▁hi", -0.5], ["▁there", -0.5], ["<unk>", 0.0], ["</s>", 0.0]]),
        TokenizerConfig(eos_token="</s>"),
    )
    out = tmp_path / "artifact"
    tokenizer.save_pretrained(out)
    return out


def test_encode_text(artifact, capsys):
    assert main(["encode", "--artifact", str(artifact), "--text", "▁hi▁there"]) == 0
    assert json.loads(capsys.readouterr().out) == [0, 1]


def test_encode_file_as_tokens(artifact, tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("▁hi▁there\nzz▁hi\n", encoding="utf-8")
    assert main(["encode", "--artifact", str(artifact), "--input", str(source), "--tokens"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line) for line in lines] == [["▁hi", "▁there"], ["zz", "▁hi"]]


def test_encode_with_eos(artifact, capsys):
    assert main(["encode", "--artifact", str(artifact), "--text", "▁hi", "--add-special-tokens"]) == 0
    assert json.loads(capsys.readouterr().out) == [0, 3]


def test_decode_ids(artifact, capsys):
    assert main(["decode", "--artifact", str(artifact), "--ids", "0,1,3"]) == 0
    assert capsys.readouterr().out.strip() == "hi there"


def test_yaml_config_overrides_tokenizer_config(artifact, tmp_path, capsys):
    overrides = tmp_path / "override.yaml"
    overrides.write_text("tokenizer:\n  clean_up_tokenization_spaces: false\n", encoding="utf-8")
    assert main(["decode", "--artifact", str(artifact), "--config", str(overrides), "--ids", "0,1"]) == 0
    assert capsys.readouterr().out.strip() == "▁hi▁there"


def test_yaml_config_must_be_a_mapping(artifact, tmp_path):
    overrides = tmp_path / "override.yaml"
    overrides.write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ValueError):
        main(["decode", "--artifact", str(artifact), "--config", str(overrides), "--ids", "0"])


def test_bench(artifact, tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("▁hi▁there\n▁there\n", encoding="utf-8")
    assert main(["bench", "--artifact", str(artifact), "--input", str(source), "--repeat", "2", "--warmup", "0"]) == 0
    out = capsys.readouterr().out
    assert "tokens_per_sec=" in out
    assert "latency_us p50=" in out
