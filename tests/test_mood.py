import pytest

from moodterm.mood import Mood, MoodManager


def test_starts_in_none_mood_with_default_colours():
    manager = MoodManager()
    assert manager.mood == "None"
    assert manager.text_color == (255, 255, 255)
    assert manager.background_color == (10, 10, 10)


def test_set_mood_is_case_insensitive():
    manager = MoodManager()
    assert manager.set_mood("HaPpY") is True
    assert manager.mood == "Happy"
    assert manager.current is Mood.HAPPY


def test_set_mood_changes_colours():
    manager = MoodManager()
    manager.set_mood("sad")
    assert manager.text_color == (135, 206, 250)
    assert manager.background_color == (15, 20, 35)


def test_unknown_mood_is_rejected_and_nothing_changes():
    manager = MoodManager()
    manager.set_mood("angry")
    assert manager.set_mood("bogus") is False
    assert manager.mood == "Angry"
    assert manager.text_color == (255, 90, 90)


def test_crazy_keeps_previous_colours_until_update():
    manager = MoodManager()
    manager.set_mood("excited")
    before = (manager.text_color, manager.background_color)
    manager.set_mood("crazy")
    assert manager.mood == "Crazy"
    assert (manager.text_color, manager.background_color) == before


@pytest.mark.parametrize("elapsed", [0.0, 0.7, 3.3, 12.5])
def test_crazy_background_is_inverse_of_text(elapsed):
    manager = MoodManager()
    manager.set_mood("crazy")
    manager.update(elapsed)
    for text, back in zip(manager.text_color, manager.background_color):
        assert 0 <= text <= 255
        assert text + back == 255


def test_update_leaves_static_moods_alone():
    manager = MoodManager()
    manager.set_mood("happy")
    manager.update(5.0)
    assert manager.text_color == (255, 223, 88)


def test_available_moods_order():
    assert MoodManager().available_moods() == [
        "Happy", "Sad", "Angry", "Excited", "Crazy", "None",
    ]


def test_from_name_raises_for_unknown():
    with pytest.raises(ValueError):
        Mood.from_name("sleepy")