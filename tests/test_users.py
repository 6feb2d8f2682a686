import io

import pytest

from simplejudge.users import AccountSystem, User


def make_system(text=""):
    out = io.StringIO()
    return AccountSystem(io.StringIO(text), out), out


def write_users(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("alice,password\nbob,secret\n", encoding="utf-8")
    return path


def test_load_reads_users(tmp_path):
    system, _ = make_system()
    system.load(write_users(tmp_path))
    assert system.users == [User("alice", "password"), User("bob", "secret")]


def test_load_missing_file_raises(tmp_path):
    system, _ = make_system()
    with pytest.raises(FileNotFoundError):
        system.load(tmp_path / "missing.csv")


def test_line_without_comma_has_empty_password(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("carol\n", encoding="utf-8")
    system, _ = make_system()
    system.load(path)
    assert system.search("carol") == User("carol", "")


def test_extra_fields_are_ignored(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("dave,secret,extra\n", encoding="utf-8")
    system, _ = make_system()
    system.load(path)
    assert system.search("dave").password == "secret"


def test_search_missing_returns_none(tmp_path):
    system, _ = make_system()
    system.load(write_users(tmp_path))
    assert system.search("nobody") is None


def test_add_user_persists(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("alice,password\n", encoding="utf-8")
    system, _ = make_system()
    system.load(path)
    system.add_user("bob", "secret")
    assert path.read_text(encoding="utf-8") == "alice,password\nbob,secret\n"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("", encoding="utf-8")
    first, _ = make_system()
    first.load(path)
    first.add_user("alice", "password")
    first.add_user("bob", "token")
    second, _ = make_system()
    second.load(path)
    assert second.users == first.users


def test_save_without_path_raises():
    system, _ = make_system()
    with pytest.raises(ValueError):
        system.save()


def test_sign_up_retries_until_passwords_match():
    system, out = make_system("carol\nsecret\ntoken\nsecret\nsecret\n")
    user = system.sign_up()
    assert user == User("carol", "secret")
    assert system.search("carol") == user
    assert "two passwords are not the same" in out.getvalue()


def test_login_success(tmp_path):
    system, out = make_system("alice\npassword\n")
    system.load(write_users(tmp_path))
    assert system.login() == "alice"
    assert system.logged_in == "alice"
    assert "Welcome aboard, alice." in out.getvalue()


def test_login_second_attempt(tmp_path):
    system, out = make_system("bob\ntoken\nsecret\n")
    system.load(write_users(tmp_path))
    assert system.login() == "bob"
    assert "Password incorrect" in out.getvalue()


def test_login_too_many_attempts_returns_to_name_prompt(tmp_path):
    system, out = make_system(
        "alice\ntoken\ntoken\ntoken\nbob\nsecret\n")
    system.load(write_users(tmp_path))
    assert system.login() == "bob"
    assert "Too many unsuccessful sign-in attempts" in out.getvalue()


def test_login_unknown_user_then_sign_up(tmp_path):
    system, out = make_system(
        "erin\n-1\nerin\nsecret\nsecret\nerin\nsecret\n")
    system.load(write_users(tmp_path))
    assert system.login() == "erin"
    assert "User is not exist!" in out.getvalue()
    assert system.search("erin") == User("erin", "secret")


def test_login_end_of_input_raises():
    system, _ = make_system("")
    with pytest.raises(EOFError):
        system.login()