from ll1_recognizer import GRAMMAR, Accepted, RecognizerState, Rejected, StreamingRecognizer


def test_state_machine_walk():
    r = StreamingRecognizer()
    assert r.state is RecognizerState.START
    assert r.allowed_terminals() == {"a", "b", "."}

    assert r.step("a") is True
    assert r.state is RecognizerState.REPEATING
    assert r.step(" ") is True
    assert r.step("b") is True
    assert r.state is RecognizerState.REPEATING
    assert r.accepted() is False

    assert r.step(".") is True
    assert r.state is RecognizerState.TERMINATED
    assert r.accepted() is True
    assert r.allowed_terminals() == set()
    assert isinstance(r.outcome(), Accepted)


def test_terminator_from_start():
    r = StreamingRecognizer()
    assert r.step(".")
    assert r.accepted()


def test_error_state_is_terminal():
    r = StreamingRecognizer()
    assert r.feed("a b") is True
    assert r.step("c") is False
    assert r.state is RecognizerState.ERROR
    assert r.allowed_terminals() == set()
    # later symbols change nothing
    assert r.step(".") is False
    outcome = r.outcome()
    assert isinstance(outcome, Rejected)
    assert (outcome.found, outcome.offset, outcome.index) == ("c", 3, 2)


def test_no_steps_after_termination():
    r = StreamingRecognizer()
    r.feed(".")
    assert r.step("a") is False
    assert r.accepted()


def test_unterminated_outcome():
    r = StreamingRecognizer()
    r.feed("a b a")
    outcome = r.outcome()
    assert isinstance(outcome, Rejected)
    assert outcome.at_end
    assert outcome.expected == ("a", "b", ".")


def test_reset():
    r = StreamingRecognizer()
    r.feed("x")
    r.reset()
    assert r.state is RecognizerState.START
    assert r.feed("ba.")
    assert r.accepted()


def test_allowed_terminals_track_the_sequence_first_set():
    r = StreamingRecognizer()
    for ch in "ab a":
        assert r.allowed_terminals() == GRAMMAR.first("S")
        r.step(ch)
    r.step(".")
    assert r.allowed_terminals() == set()
