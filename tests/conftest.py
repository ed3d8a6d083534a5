import pytest

SCRIPT_A = "Scene 1\n#\nAlice\nHello there\nやあ\n\nBob\nSee you tomorrow\nまた明日\n"
SCRIPT_B = "Scene 2\n#\n# [intro]\nCarol\nGood morning\nおはよう\n"
HEADER = "original;translation;comment;flag"


@pytest.fixture
def workspace(tmp_path):
    scripts = tmp_path / "scripts"
    (scripts / "part2").mkdir(parents=True)
    (scripts / "a.txt").write_text(SCRIPT_A, encoding="utf-8")
    (scripts / "part2" / "b.txt").write_text(SCRIPT_B, encoding="utf-8")

    work = tmp_path / "work"
    (work / "nested").mkdir(parents=True)
    (work / "scene1.csv").write_text(HEADER + "\nHello there.;;;\nSee you tomorrow;;;\n", encoding="utf-8")
    (work / "nested" / "scene2.CSV").write_text(HEADER + "\nGood morning;;;\n", encoding="utf-8")
    (work / "untouched.csv").write_text(HEADER + "\nNothing like it;;;\n", encoding="utf-8")
    (work / "notes.txt").write_text(HEADER + "\nHello there;;;\n", encoding="utf-8")
    return scripts, work
