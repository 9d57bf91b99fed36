# Stochastic grammar for short English sentences
# Noun phrases, verb phrases, and the sentences built from them. Every choice
# is made with a randbelow(n) function returning an integer in range(n); the
# order in which draws are made is significant, as a fixed sequence of draws
# must always produce the same sentence.
from wordlists import WordCategory as W, Lexicon, LexiconExhausted

SINGULAR_DETERMINERS = "the this my your his her its our their that any every".split()
PLURAL_DETERMINERS = "the these my your his her its our their those all some".split()
# Plural determiner draws beyond the word list produce a two-digit numeral
PLURAL_DETERMINER_OUTCOMES = 20
DIGITS = "23456789"

class PhraseBuilder:
	"""Build noun phrases, prepositional phrases, and infinitive verb phrases

	lexicon: mapping of WordCategory to a sequence of words. Anything other
	than a wordlists.Lexicon gets copied into one. Every category must be
	non-empty.

	randbelow: function(n) returning a uniformly-distributed int in range(n)
	"""
	def __init__(self, lexicon, randbelow):
		for cat in W:
			if not lexicon.get(cat):
				raise LexiconExhausted("no words in category %s" % cat.value)
		if not isinstance(lexicon, Lexicon): lexicon = Lexicon(lexicon)
		self.lexicon = lexicon
		self.randbelow = randbelow

	def word(self, cat):
		return self.lexicon.choice(cat, self.randbelow)

	def chance(self, n):
		"""One chance in n"""
		return self.randbelow(n) == 0

	def singular_noun_phrase(self):
		if self.chance(2):
			# Mass noun, maybe with an adjective
			if self.chance(4): return self.word(W.Adjective) + " " + self.word(W.MassNoun)
			return self.word(W.MassNoun)
		determiner = SINGULAR_DETERMINERS[self.randbelow(len(SINGULAR_DETERMINERS))]
		if self.chance(4):
			adjective = self.word(W.Adjective)
			return " ".join((determiner, adjective, self.word(W.SingularCountNoun)))
		return determiner + " " + self.word(W.SingularCountNoun)

	def numeral(self):
		first = DIGITS[self.randbelow(len(DIGITS))]
		return first + DIGITS[self.randbelow(len(DIGITS))]

	def plural_noun_phrase(self):
		if self.chance(4):
			# No determiner at all
			if self.chance(4): return self.word(W.Adjective) + " " + self.word(W.PluralCountNoun)
			return self.word(W.PluralCountNoun)
		which = self.randbelow(PLURAL_DETERMINER_OUTCOMES)
		if which < len(PLURAL_DETERMINERS): determiner = PLURAL_DETERMINERS[which]
		else: determiner = self.numeral()
		if self.chance(4):
			adjective = self.word(W.Adjective)
			return " ".join((determiner, adjective, self.word(W.PluralCountNoun)))
		return determiner + " " + self.word(W.PluralCountNoun)

	def noun_phrase(self):
		if self.randbelow(2): return self.singular_noun_phrase()
		return self.plural_noun_phrase()

	def prepositional_phrase(self):
		np = self.noun_phrase()
		return self.word(W.Preposition) + " " + np

	def transitive(self, cat):
		# The object is built before the verb is drawn
		np = self.noun_phrase()
		return self.word(cat) + " " + np

	def infinite_verb_phrase(self):
		"""Reference form of a verb, with an object if it's transitive"""
		if self.chance(2): return self.word(W.IntransitiveVerb)
		return self.transitive(W.TransitiveVerb)

class SentenceBuilder(PhraseBuilder):
	"""Assertions, questions, and commands"""

	def singular_verb_phrase(self):
		form = self.randbelow(4)
		if form == 0: return self.word(W.TPSPIIntransitiveVerb)
		if form == 1: return self.transitive(W.TPSPITransitiveVerb)
		if form == 2: return self.word(W.PastIntransitiveVerb)
		return self.transitive(W.PastTransitiveVerb)

	def plural_verb_phrase(self):
		# Plural subjects take the reference form in the present tense
		form = self.randbelow(4)
		if form == 0: return self.word(W.IntransitiveVerb)
		if form == 1: return self.transitive(W.TransitiveVerb)
		if form == 2: return self.word(W.PastIntransitiveVerb)
		return self.transitive(W.PastTransitiveVerb)

	def assertion(self):
		# Subject and predicate must agree in number
		if self.chance(2): np, vp = self.singular_noun_phrase(), self.singular_verb_phrase()
		else: np, vp = self.plural_noun_phrase(), self.plural_verb_phrase()
		return "%s %s." % (np, vp)

	# Auxiliary for each question form, and how to build its subject.
	# Only do/does care about number; the modals take any noun phrase.
	QUESTIONS = [
		("can", "noun_phrase"),
		("could", "noun_phrase"),
		("did", "noun_phrase"),
		("do", "plural_noun_phrase"),
		("does", "singular_noun_phrase"),
		("may", "noun_phrase"),
		("might", "noun_phrase"),
		("must", "noun_phrase"),
		("should", "noun_phrase"),
		("will", "noun_phrase"),
		("would", "noun_phrase"),
	]

	def question(self):
		vp = self.infinite_verb_phrase() # Built before the auxiliary is chosen
		aux, subject = self.QUESTIONS[self.randbelow(len(self.QUESTIONS))]
		np = getattr(self, subject)()
		return "%s %s %s?" % (aux, np, vp)

	def command(self):
		return self.infinite_verb_phrase() + "!"
