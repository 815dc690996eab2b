from bundle import relocate_bundle


def _make_bundle(root, name='docker-experiment'):
    bundle = root / name
    bundle.mkdir()
    (bundle / 'Dockerfile').write_text('FROM php:8.2-apache\n')
    (bundle / 'docker-compose.yml').write_text('services: {}\n')
    (bundle / '.dockerignore').write_text('vendor\n')
    (bundle / 'docker').mkdir()
    (bundle / 'docker' / 'apache.conf').write_text('ServerName localhost\n')
    return bundle


def _snapshot(root):
    return sorted(str(p.relative_to(root)) for p in root.rglob('*'))


def test_moves_visible_hidden_and_directories(tmp_path):
    bundle = _make_bundle(tmp_path)

    new_root = relocate_bundle(str(bundle), 'docker-experiment')

    assert new_root == str(tmp_path)
    assert not bundle.exists()
    assert (tmp_path / 'Dockerfile').is_file()
    assert (tmp_path / '.dockerignore').is_file()
    assert (tmp_path / 'docker' / 'apache.conf').is_file()


def test_other_directory_names_are_left_alone(tmp_path, capsys):
    bundle = _make_bundle(tmp_path, name='my-bundle')
    before = _snapshot(tmp_path)

    assert relocate_bundle(str(bundle), 'docker-experiment') is None

    assert _snapshot(tmp_path) == before
    assert 'Not in docker-experiment directory' in capsys.readouterr().out


def test_existing_directory_in_parent_keeps_bundle(tmp_path, capsys):
    bundle = _make_bundle(tmp_path)
    (tmp_path / 'docker').mkdir()

    new_root = relocate_bundle(str(bundle), 'docker-experiment')

    assert new_root == str(tmp_path)
    assert (tmp_path / 'Dockerfile').is_file()
    assert (bundle / 'docker' / 'apache.conf').is_file()
    assert 'Could not remove docker-experiment directory' in capsys.readouterr().out


def test_existing_file_in_parent_is_replaced(tmp_path):
    bundle = _make_bundle(tmp_path)
    (tmp_path / 'Dockerfile').write_text('old\n')

    relocate_bundle(str(bundle), 'docker-experiment')

    assert (tmp_path / 'Dockerfile').read_text() == 'FROM php:8.2-apache\n'
