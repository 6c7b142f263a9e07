"""
Curated word lists for vocabulary analysis.
"""

from wordwise.models.vocabulary import AcademicLevel, TransitionContext

ACADEMIC_VOCABULARY_LISTS = {
    AcademicLevel.ELEMENTARY: [
        "important", "different", "example", "problem", "answer", "question",
        "because", "reason", "result", "change", "compare", "explain",
    ],
    AcademicLevel.MIDDLE_SCHOOL: [
        "analyze", "describe", "identify", "compare", "contrast", "evaluate",
        "significant", "evidence", "conclusion", "process", "method", "factor",
    ],
    AcademicLevel.HIGH_SCHOOL: [
        "synthesize", "demonstrate", "establish", "investigate", "examine", "illustrate",
        "interpret", "justify", "furthermore", "moreover", "consequently", "therefore",
        "nevertheless", "however", "substantial", "comprehensive", "extensive", "crucial",
    ],
    AcademicLevel.COLLEGE: [
        "paradigm", "methodology", "hypothesis", "theoretical", "empirical", "substantiate",
        "corroborate", "extrapolate", "juxtapose", "dichotomy", "synthesis", "discourse",
        "epistemology", "ontology", "phenomenology", "hermeneutics", "dialectical",
    ],
}

# Informal words mapped to academic replacements. Multi-word keys never match a
# single token and are only used for lookups.
INFORMAL_TO_ACADEMIC = {
    "really": ["significantly", "considerably", "substantially"],
    "very": ["extremely", "particularly", "notably"],
    "big": ["substantial", "significant", "considerable"],
    "small": ["minimal", "limited", "modest"],
    "good": ["effective", "beneficial", "advantageous"],
    "bad": ["detrimental", "problematic", "adverse"],
    "a lot": ["numerous", "substantial", "considerable"],
    "lots of": ["numerous", "multiple", "various"],
    "thing": ["element", "aspect", "component"],
    "stuff": ["material", "content", "elements"],
    "get": ["obtain", "acquire", "achieve"],
    "make": ["create", "establish", "generate"],
    "show": ["demonstrate", "illustrate", "reveal"],
    "tell": ["indicate", "suggest", "convey"],
    "go": ["proceed", "advance", "progress"],
    "come": ["emerge", "arise", "develop"],
    "put": ["place", "position", "establish"],
    "take": ["adopt", "utilize", "implement"],
    "use": ["utilize", "employ", "implement"],
    "help": ["assist", "facilitate", "support"],
    "try": ["attempt", "endeavor", "strive"],
    "want": ["desire", "seek", "require"],
    "need": ["require", "necessitate", "demand"],
    "think": ["believe", "consider", "maintain"],
    "know": ["understand", "recognize", "acknowledge"],
    "see": ["observe", "perceive", "recognize"],
    "find": ["discover", "identify", "determine"],
    "look": ["examine", "investigate", "analyze"],
    "work": ["function", "operate", "perform"],
    "start": ["begin", "initiate", "commence"],
    "end": ["conclude", "terminate", "finalize"],
    "keep": ["maintain", "preserve", "retain"],
    "give": ["provide", "offer", "present"],
    "talk": ["discuss", "communicate", "converse"],
    "say": ["state", "declare", "assert"],
    "ask": ["inquire", "request", "question"],
}

# Function words excluded from repetition checks
OVERUSED_WORDS = frozenset([
    "the", "and", "that", "this", "it", "is", "was", "are", "were",
    "said", "then", "also", "but", "so", "just", "very", "really",
])

TRANSITION_WORDS = {
    TransitionContext.ADDITION: ["furthermore", "moreover", "additionally", "in addition", "also"],
    TransitionContext.CONTRAST: ["however", "nevertheless", "conversely", "on the other hand", "whereas"],
    TransitionContext.CAUSE: ["therefore", "consequently", "thus", "as a result", "hence"],
    TransitionContext.SEQUENCE: ["first", "second", "subsequently", "finally", "ultimately"],
    TransitionContext.EMPHASIS: ["indeed", "certainly", "undoubtedly", "notably", "particularly"],
    TransitionContext.EXAMPLE: ["for instance", "specifically", "namely", "in particular", "such as"],
}
