from health_companion.services.assistant import (
    DEFAULT_REPLY, GREETING_REPLY, QUICK_QUESTIONS, THANKS_REPLY, assistant_reply,
)


def test_rules_first_match_wins():
    assert "symptoms" in assistant_reply("My back pain is bad")
    assert "pharmacist" in assistant_reply("Which medicine is best?")
    assert "emergency services" in assistant_reply("This is urgent")
    # symptom rule outranks the medication rule
    assert "symptoms" in assistant_reply("pain after my medication")


def test_greeting_needs_a_whole_word():
    assert assistant_reply("Hi there") == GREETING_REPLY
    assert assistant_reply("this and that") == DEFAULT_REPLY


def test_thanks_and_default():
    assert assistant_reply("Thanks a lot") == THANKS_REPLY
    assert assistant_reply("") == DEFAULT_REPLY
    assert len(QUICK_QUESTIONS) == 4
