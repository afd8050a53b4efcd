import pytest

ORIGEN_LOCAL = 'http://localhost:5173'
ORIGEN_VERCEL = 'https://to-do-list-peruvian-git-main-hades0413-pluton.vercel.app'


@pytest.mark.parametrize('origen', [ORIGEN_LOCAL, ORIGEN_VERCEL])
def test_preflight_de_origen_permitido(client, origen):
    respuesta = client.options('/api/tareas/1', headers={
        'Origin': origen,
        'Access-Control-Request-Method': 'PUT',
        'Access-Control-Request-Headers': 'Content-Type, X-Cliente',
    })

    assert respuesta.headers['Access-Control-Allow-Origin'] == origen
    metodos = respuesta.headers['Access-Control-Allow-Methods']
    for metodo in ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']:
        assert metodo in metodos
    assert 'x-cliente' in respuesta.headers['Access-Control-Allow-Headers'].lower()
    assert 'Access-Control-Allow-Credentials' not in respuesta.headers


def test_origen_no_permitido(client):
    respuesta = client.get('/api/tareas/proyecto/1', headers={'Origin': 'https://evil.example.com'})

    assert 'Access-Control-Allow-Origin' not in respuesta.headers


def test_cors_solo_bajo_api(client):
    respuesta = client.get('/health', headers={'Origin': ORIGEN_LOCAL})

    assert 'Access-Control-Allow-Origin' not in respuesta.headers
