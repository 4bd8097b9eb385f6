from .bpe import (
    DEFAULT_VOCAB_SIZE,
    SHARED_VOCAB_SIZE,
    BuilderState,
    VocabularyBuilder,
    learn_vocabulary,
    train_bpe,
)
from .decoder import decode, decode_all
from .normalize import CharClass, classify, normalize
from .reader import ParseError, Translation, read_translations
from .sequence import SymbolSequence
from .vocabulary import InvalidReferenceError, Vocabulary
