import pytest

from hostel_occupancy.cli import build_parser, main


def test_assign_arguments():
    args = build_parser().parse_args(["assign", "P1", "T1", "3", "--name", "Asha", "--floor", "1"])
    assert (args.property_id, args.tenant_id, args.room) == ("P1", "T1", 3)
    assert args.name == "Asha"
    assert args.floor == 1


def test_add_property_arguments():
    args = build_parser().parse_args(["add-property", "--label", "Hill View", "--rooms", "12", "--limit", "3"])
    assert args.rooms == 12
    assert args.limit == 3
    assert args.owner == ""


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "usage" in capsys.readouterr().out


@pytest.fixture
def cli_db(tmp_path, monkeypatch):
    """Point the CLI at a throwaway file DB; each main() call runs its own event loop."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import NullPool

    from hostel_occupancy import cli
    from hostel_occupancy.config import OccupancyConfig, Settings
    from hostel_occupancy.db import engine as engine_module

    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    test_engine = create_async_engine(url, poolclass=NullPool)
    monkeypatch.setattr(engine_module, "engine", test_engine)
    monkeypatch.setattr(
        engine_module, "async_session_factory",
        async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False),
    )
    monkeypatch.setattr(cli, "get_settings", lambda: Settings(
        database_url=url, occupancy=OccupancyConfig(room_occupant_limit=1),
    ))
    return url


def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def _field(line, name):
    return line.split(f"{name}=")[1].split(",")[0].rstrip(")")


def test_commands_drive_a_hostel_end_to_end(cli_db, capsys):
    assert cli_db in _run(capsys, "init-db")

    out = _run(capsys, "add-property", "--label", "Hill View", "--rooms", "3")
    assert out.startswith("Property created: Hill View")
    prop_id = _field(out, "id")

    out = _run(capsys, "assign", prop_id, "T1", "2", "--name", "Asha")
    assert out.startswith("Assigned T1 to room 2")
    assignment_id = _field(out, "id")

    rooms = _run(capsys, "rooms", prop_id).splitlines()
    assert len(rooms) == 3
    assert "vacant" in rooms[0]
    assert "occupied" in rooms[1] and "Asha" in rooms[1]
    assert "WARNING" not in "\n".join(rooms)

    out = _run(capsys, "unassign", assignment_id)
    assert out.strip() == "Vacated room 2 held by T1"
    assert all("vacant" in line for line in _run(capsys, "rooms", prop_id).splitlines())


def test_typed_failures_exit_with_code(cli_db, capsys):
    _run(capsys, "init-db")
    prop_id = _field(_run(capsys, "add-property", "--label", "Annex", "--rooms", "2"), "id")
    _run(capsys, "assign", prop_id, "T1", "1")

    cases = [
        (["assign", prop_id, "T2", "9"], "out_of_range"),
        (["assign", prop_id, "T1", "2"], "already_assigned"),
        (["assign", prop_id, "T2", "1"], "room_full"),
        (["rooms", "missing"], "not_found"),
        (["unassign", "missing"], "not_found"),
    ]
    for argv, code in cases:
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2
        assert capsys.readouterr().out.startswith(f"Error ({code}):")
