from dualsubs.subtitles import Cue, iter_cues, read_cues


def test_no_lines():
    assert list(iter_cues([])) == []


def test_empty_line():
    assert list(iter_cues([""])) == []


def test_empty_lines():
    assert list(iter_cues(["", ""])) == []


def test_first_line_not_an_index():
    lines = ["garbage", "1", "00:00:01,000 --> 00:00:02,000", "Hello"]
    assert list(iter_cues(lines)) == []


def test_one_sub():
    lines = [
        "1",
        "00:00:14,600 --> 00:00:20,000",
        "Hello.",
        "World.",
        "",
    ]
    assert list(iter_cues(lines)) == [
        Cue(
            index=1,
            time_range="00:00:14,600 --> 00:00:20,000",
            lines=("Hello.", "World."),
        )
    ]


def test_one_sub_without_trailing_blank():
    lines = [
        "1",
        "00:00:14,600 --> 00:00:20,000",
        "Hvis vi jobber rundt ...",
        "Her er vannet dypere.",
    ]
    cues = list(iter_cues(lines))
    assert len(cues) == 1
    assert cues[0].lines == ("Hvis vi jobber rundt ...", "Her er vannet dypere.")


def test_two_subs():
    lines = [
        "1",
        "00:00:14,600 --> 00:00:20,000",
        "Hvis vi jobber rundt ...",
        "Her er vannet dypere.",
        "",
        "2",
        "00:00:21,280 --> 00:00:26,960",
        "Hvis vi ser på alternativ 1 først, Jåttå-",
        "vågen, der er det et par problemer.",
        "",
    ]
    cues = list(iter_cues(lines))
    assert [c.index for c in cues] == [1, 2]
    assert cues[1].time_range == "00:00:21,280 --> 00:00:26,960"
    assert cues[1].lines == (
        "Hvis vi ser på alternativ 1 først, Jåttå-",
        "vågen, der er det et par problemer.",
    )


def test_cue_without_text_lines():
    lines = ["1", "00:00:01,000 --> 00:00:02,000", "", "2", "00:00:03,000 --> 00:00:04,000", "x"]
    cues = list(iter_cues(lines))
    assert cues[0].lines == ()
    assert cues[1] == Cue(2, "00:00:03,000 --> 00:00:04,000", ("x",))


def test_stops_at_garbage_between_cues():
    lines = ["1", "t1", "a", "", "oops", "2", "t2", "b"]
    assert [c.index for c in iter_cues(lines)] == [1]


def test_index_without_time_range():
    assert list(iter_cues(["1"])) == []


def test_strips_line_endings():
    lines = ["1\r\n", "00:00:01,000 --> 00:00:02,000\r\n", "Hi\r\n", "\r\n"]
    assert list(iter_cues(lines)) == [Cue(1, "00:00:01,000 --> 00:00:02,000", ("Hi",))]


def test_is_lazy():
    consumed = []

    def source():
        for line in ["1", "t1", "a", "", "2", "t2", "b", ""]:
            consumed.append(line)
            yield line

    cues = iter_cues(source())
    first = next(cues)
    assert first.index == 1
    assert "2" not in consumed


def test_read_cues_from_file(tmp_path):
    path = tmp_path / "sub.srt"
    path.write_text(
        "\ufeff1\n00:00:01,000 --> 00:00:02,000\nKaffe på Café\n\n"
        "2\n00:00:03,000 --> 00:00:04,000\n二行目\n",
        encoding="utf-8",
    )
    cues = list(read_cues(path))
    assert [c.index for c in cues] == [1, 2]
    assert cues[0].lines == ("Kaffe på Café",)
    assert cues[1].lines == ("二行目",)
    # each call starts a fresh pass
    assert list(read_cues(path)) == cues


def test_zero_index_ends_sequence():
    lines = ["1", "t1", "a", "", "0", "t0", "b", "", "2", "t2", "c"]
    assert [c.index for c in iter_cues(lines)] == [1]
    assert list(iter_cues(["0", "t0", "b"])) == []


def test_index_with_leading_zero_and_whitespace():
    assert list(iter_cues([" 07 ", "t", "x"])) == [Cue(7, "t", ("x",))]
