"""Tests for the grammar distribution report."""
import random
import clize
import pytest
from phrasestats import CountingAssembler, collect, has_numeral, is_prefixed, main, sentence_kind

def test_classifiers():
	assert sentence_kind("Cats sleep.") == "assertion"
	assert sentence_kind("Can milk sleep?") == "question"
	assert sentence_kind("Sleep!") == "command"
	assert is_prefixed("Under cats: chase red milk!")
	assert is_prefixed("Under cats, chase red milk!")
	assert not is_prefixed("The cat sleeps.")
	assert has_numeral("47 cats")
	assert not has_numeral("the cats")

def test_collect(bundled_lexicon):
	assembler = CountingAssembler(bundled_lexicon, random.Random(6).randrange)
	numerals, kinds, prefixed, attempts = collect(assembler, 3000)
	assert numerals.total() == kinds.total() == prefixed.total() == 3000
	assert abs(kinds["assertion"] / 3000 - 0.5) < 0.05
	assert abs(prefixed[True] / 3000 - 1/6) < 0.04
	assert attempts >= 1

def test_report(capsys):
	main(samples=200, seed="3")
	out = capsys.readouterr().out
	assert "Numeral determiners in plural noun phrases (200 samples)" in out
	assert "Sentence kinds" in out
	assert "Mean attempts per passphrase" in out

@pytest.mark.parametrize("samples", [0, -5])
def test_too_few_samples(samples):
	with pytest.raises(clize.ArgumentError):
		main(samples=samples, seed="1")

def test_missing_words(tmp_path, capsys):
	with pytest.raises(SystemExit) as exc:
		main(samples=5, words=str(tmp_path))
	assert exc.value.code.startswith("phrasestats: unable to open file")
	assert capsys.readouterr().out == ""
