import io

import pytest

from patternkit.users import CommandShell, Group, User, UserError, UserManager


@pytest.fixture
def manager():
    return UserManager()


def make_shell(manager=None):
    out, err = io.StringIO(), io.StringIO()
    return CommandShell(manager or UserManager(), out, err), out, err


def test_create_and_get_user(manager):
    created = manager.create_user(1, "alice", "likes tea")
    fetched = manager.get_user(1)
    assert fetched is created
    assert fetched.username == "alice"
    assert fetched.additional_info == "likes tea"
    assert fetched.group is None


def test_duplicate_user_rejected(manager):
    manager.create_user(1, "alice", "")
    with pytest.raises(UserError, match="User with this ID already exists."):
        manager.create_user(1, "bob", "")


def test_missing_user_and_group(manager):
    with pytest.raises(UserError, match="User not found."):
        manager.get_user(5)
    with pytest.raises(UserError, match="User not found."):
        manager.delete_user(5)
    with pytest.raises(UserError, match="Group not found."):
        manager.get_group(5)
    with pytest.raises(UserError, match="Group not found."):
        manager.delete_group(5)


def test_duplicate_group_rejected(manager):
    manager.create_group(3)
    with pytest.raises(UserError, match="Group with this ID already exists."):
        manager.create_group(3)


def test_add_user_to_group_sets_membership(manager):
    user = manager.create_user(1, "alice", "")
    group = manager.create_group(7)
    manager.add_user_to_group(1, 7)
    assert user.group is group
    assert group.users == [user]
    manager.add_user_to_group(1, 7)
    assert len(group.users) == 1


def test_add_user_to_group_checks_user_first(manager):
    with pytest.raises(UserError, match="User not found."):
        manager.add_user_to_group(1, 2)
    manager.create_user(1, "alice", "")
    with pytest.raises(UserError, match="Group not found."):
        manager.remove_user_from_group(1, 2)


def test_remove_user_from_group(manager):
    user = manager.create_user(1, "alice", "")
    group = manager.create_group(7)
    manager.add_user_to_group(1, 7)
    manager.remove_user_from_group(1, 7)
    assert user.group is None
    assert group.users == []


def test_delete_user_removes_membership(manager):
    manager.create_user(1, "alice", "")
    group = manager.create_group(7)
    manager.add_user_to_group(1, 7)
    manager.delete_user(1)
    assert group.users == []
    assert manager.all_users() == []


def test_delete_group_detaches_users(manager):
    user = manager.create_user(1, "alice", "")
    manager.create_group(7)
    manager.add_user_to_group(1, 7)
    manager.delete_group(7)
    assert user.group is None
    assert manager.all_groups() == []


def test_all_users_keeps_order(manager):
    manager.create_user(2, "bob", "")
    manager.create_user(1, "alice", "")
    assert [u.user_id for u in manager.all_users()] == [2, 1]


def test_group_rejects_none():
    group = Group(1)
    with pytest.raises(ValueError):
        group.add_user(None)
    with pytest.raises(ValueError):
        group.remove_user(None)


def test_user_describe_with_and_without_group():
    user = User(4, "dana", "info here")
    assert user.describe() == (
        "User ID: 4\nUsername: dana\nAdditional Info: info here\nNot in a group\n"
    )
    group = Group(9)
    group.add_user(user)
    assert user.describe().endswith("Group ID: 9\n")


def test_group_describe_lists_members():
    group = Group(9)
    user = User(4, "dana")
    group.add_user(user)
    assert group.describe() == "Group ID: 9\nUsers:\n" + user.describe() + "---\n"


def test_shell_create_user_joins_info():
    shell, out, err = make_shell()
    assert shell.execute("createUser 1 alice likes green tea") is True
    assert out.getvalue() == "User created successfully.\n"
    assert shell.manager.get_user(1).additional_info == "likes green tea"
    assert err.getvalue() == ""


def test_shell_create_user_usage():
    shell, out, err = make_shell()
    shell.execute("createUser 1")
    assert err.getvalue() == "Usage: createUser {userId} {username} {…additional info…}\n"
    assert shell.manager.all_users() == []


def test_shell_wrong_arity_usage():
    shell, out, err = make_shell()
    shell.execute("addUserToGroup 1")
    assert err.getvalue() == "Usage: addUserToGroup {userId} {groupId}\n"


def test_shell_reports_errors():
    shell, out, err = make_shell()
    shell.execute("getUser 3")
    assert err.getvalue() == "Error: User not found.\n"


def test_shell_bad_number():
    shell, out, err = make_shell()
    shell.execute("deleteUser abc")
    assert err.getvalue() == "Error: stoi\n"


def test_shell_number_with_trailing_text():
    shell, out, err = make_shell()
    shell.execute("createGroup 12abc")
    assert shell.manager.get_group(12).group_id == 12


def test_shell_unknown_and_exit():
    shell, out, err = make_shell()
    assert shell.execute("frobnicate") is True
    assert out.getvalue() == "Unknown command.\n"
    assert shell.execute("exit") is False
    assert shell.execute("quit") is False


def test_shell_empty_listings():
    shell, out, err = make_shell()
    shell.execute("allUsers")
    shell.execute("allGroups")
    assert out.getvalue() == "No users found.\nNo groups found.\n"


def test_shell_all_groups_output():
    manager = UserManager()
    shell, out, err = make_shell(manager)
    shell.execute("createGroup 5")
    out.truncate(0)
    out.seek(0)
    shell.execute("allGroups")
    assert out.getvalue() == manager.get_group(5).describe() + "===\n"


def test_shell_run_stops_at_exit():
    shell, out, err = make_shell()
    shell.run(["createUser 1 alice\n", "exit\n", "createUser 2 bob\n"])
    assert [u.user_id for u in shell.manager.all_users()] == [1]
    assert out.getvalue().startswith("Start program\n")
    assert "User created successfully.\n" in out.getvalue()


def test_shell_group_workflow():
    shell, out, err = make_shell()
    for line in [
        "createUser 1 alice",
        "createGroup 2",
        "addUserToGroup 1 2",
        "removeUserFromGroup 1 2",
        "deleteGroup 2",
        "deleteUser 1",
    ]:
        shell.execute(line)
    assert out.getvalue().splitlines() == [
        "User created successfully.",
        "Group created successfully.",
        "User added to group successfully.",
        "User removed from group successfully.",
        "Group deleted successfully.",
        "User deleted successfully.",
    ]
    assert err.getvalue() == ""