"""
Signals emitted by the learning views.

Usage:
    from wordlearn_app.core.signals import word_served

    @word_served.connect
    def on_word_served(sender, word, **kwargs):
        ...
"""
from blinker import Namespace

learning_signals = Namespace()

# Fired after a word has been picked for a learn request.
# Payload: word (WordPair), channel ('html' or 'api')
word_served = learning_signals.signal('word_served')
