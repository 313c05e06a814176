"""
快照存储测试
"""

from subwatch.core.snapshot import ChangeSet, SnapshotStore, subdomain_store, service_store


def test_store_file_names(tmp_path):
    subs = subdomain_store(tmp_path, 'example.com')
    assert subs.current_path == tmp_path / 'output.example.com.txt'
    assert subs.previous_path == tmp_path / 'prev_output.example.com.txt'

    svc = service_store(tmp_path)
    assert svc.current_path == tmp_path / 'httpx_res.txt'
    assert svc.previous_path == tmp_path / 'prev_httpx_res.txt'


def test_diff_against_missing_previous(tmp_path):
    store = SnapshotStore(tmp_path / 'cur.txt', tmp_path / 'prev.txt')
    store.save(['x.example.com'])
    assert store.load_previous() == []
    assert store.diff() == ChangeSet(['x.example.com'], [])


def test_rotate_replaces_previous(tmp_path):
    store = SnapshotStore(tmp_path / 'cur.txt', tmp_path / 'prev.txt')
    store.save(['a.example.com', 'b.example.com'])
    assert store.rotate() is True

    store.save(['b.example.com', 'c.example.com'])
    changes = store.diff()
    assert changes.added == ['c.example.com']
    assert changes.deleted == ['a.example.com']

    store.rotate()
    assert not store.current_path.exists()
    assert store.load_previous() == ['b.example.com', 'c.example.com']


def test_rotate_without_current_is_noop(tmp_path):
    store = SnapshotStore(tmp_path / 'cur.txt', tmp_path / 'prev.txt')
    store.previous_path.write_text('keep.example.com\n', encoding='utf-8')
    assert store.rotate() is False
    assert store.load_previous() == ['keep.example.com']


def test_changeset_truthiness():
    assert not ChangeSet([], [])
    assert ChangeSet(['a'], [])
    assert ChangeSet([], ['b'])
