import yaml

from compose_file import ComposeFile
from scaffold_bundle import main, render_dockerfile, write_bundle_files


def test_dockerfile_content(config):
    dockerfile = render_dockerfile(config)
    assert dockerfile.startswith('FROM php:8.2-apache\n')
    assert 'docker-php-ext-install pdo_mysql mbstring zip bcmath' in dockerfile
    assert 's!/var/www/html!${APACHE_DOCUMENT_ROOT}!g' in dockerfile
    assert 'php artisan migrate --force' in dockerfile
    assert dockerfile.rstrip().endswith('EXPOSE 80')


def test_compose_definition(tmp_path, config):
    write_bundle_files(str(tmp_path), config)

    document = yaml.safe_load((tmp_path / 'docker-compose.yml').read_text())
    app = document['services']['laravel-app']
    db = document['services']['mysql']
    assert app['ports'] == ['80:80']
    assert app['container_name'] == 'laravel-apache'
    assert 'ports' not in db
    assert db['expose'] == ['3306']
    assert db['environment'] == {'MYSQL_DATABASE': 'laravel', 'MYSQL_ROOT_PASSWORD': 'root'}
    assert db['volumes'] == ['mysql_data:/var/lib/mysql']
    assert 'laravel' in document['networks']


def test_generated_compose_can_be_updated(tmp_path, config):
    write_bundle_files(str(tmp_path), config)
    compose = ComposeFile(tmp_path / 'docker-compose.yml')
    compose.update_environment({'MYSQL_DATABASE': 'shop', 'MYSQL_ROOT_PASSWORD': '0000'},
                               str(tmp_path / 'docker-compose.yml.backup'))
    assert compose.get_environment('mysql')['MYSQL_ROOT_PASSWORD'] == '0000'


def test_existing_files_are_kept_without_force(tmp_path, config):
    (tmp_path / 'Dockerfile').write_text('FROM custom\n')

    results = write_bundle_files(str(tmp_path), config)

    assert results == {'Dockerfile': False, 'docker-compose.yml': True}
    assert (tmp_path / 'Dockerfile').read_text() == 'FROM custom\n'


def test_main_force_overwrites(tmp_path, config):
    (tmp_path / 'Dockerfile').write_text('FROM custom\n')
    main(['--target-dir', str(tmp_path), '--force'])
    assert (tmp_path / 'Dockerfile').read_text().startswith('FROM php:')
