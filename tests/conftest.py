import pytest
from passphrase import WORDS_DIR
from wordlists import Lexicon, WordCategory as W, load_lexicon

# One word per category, so every word draw is randbelow(1)
TINY_WORDS = {
	W.SingularCountNoun: ["cat"],
	W.PluralCountNoun: ["cats"],
	W.MassNoun: ["milk"],
	W.Adjective: ["red"],
	W.IntransitiveVerb: ["sleep"],
	W.TransitiveVerb: ["chase"],
	W.TPSPIIntransitiveVerb: ["sleeps"],
	W.TPSPITransitiveVerb: ["chases"],
	W.PastIntransitiveVerb: ["slept"],
	W.PastTransitiveVerb: ["chased"],
	W.Preposition: ["under"],
}

class Scripted:
	"""A randbelow() that replays a fixed list of draws"""
	def __init__(self, *draws):
		self.draws = list(draws)
		self.bounds = []
	def __call__(self, n):
		assert self.draws, "ran out of scripted draws"
		value = self.draws.pop(0)
		assert 0 <= value < n, "draw %d out of range(%d)" % (value, n)
		self.bounds.append(n)
		return value

@pytest.fixture
def tiny_lexicon(): return Lexicon(TINY_WORDS)

@pytest.fixture(scope="session")
def bundled_lexicon(): return load_lexicon(WORDS_DIR)
