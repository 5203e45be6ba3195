import pytest

from clientes_app.models import Cliente, Feedback, FEEDBACK_SUCCESS
from clientes_app.repository import Repo


@pytest.fixture()
def repo():
    r = Repo()
    r.replace_all([Cliente(1, "Ana", "a@x.com"), Cliente(2, "Bo", "b@x.com"), Cliente(3, None, None)])
    return r


def test_edit_field_preserves_order_and_identity(repo):
    before, _ = repo.snapshot()
    repo.edit_field(2, "email", "bo@y.com")
    after, _ = repo.snapshot()
    assert [c.id for c in after] == [1, 2, 3]
    assert after[0] is before[0]
    assert after[2] is before[2]
    assert after[1] == Cliente(2, "Bo", "bo@y.com")


def test_edit_field_on_null_column(repo):
    repo.edit_field(3, "nome", "Caio")
    assert repo.get(3) == Cliente(3, "Caio", None)


def test_snapshot_is_a_copy(repo):
    clientes, status = repo.snapshot()
    clientes.clear()
    status.is_loading = True
    clientes, status = repo.snapshot()
    assert len(clientes) == 3
    assert status.is_loading is False


def test_replace_all_and_clear(repo):
    repo.replace_all([Cliente(9, "Z", "z@x.com")])
    assert repo.get(1) is None
    assert repo.get(9).nome == "Z"
    repo.clear()
    assert repo.snapshot()[0] == []


def test_status_setters(repo):
    repo.set_loading(True)
    repo.set_error("erro")
    repo.set_saving(2)
    repo.set_feedback(Feedback(FEEDBACK_SUCCESS, "ok"))
    _, status = repo.snapshot()
    assert repo.is_loading() is True
    assert status.error_message == "erro"
    assert status.saving_id == 2
    assert status.feedback.is_success


def test_cliente_from_row_and_payload():
    cliente = Cliente.from_row({"id": "4", "nome": "Di", "email": None})
    assert cliente == Cliente(4, "Di", None)
    assert cliente.update_payload() == {"nome": "Di", "email": None}
