import pytest
from sqlalchemy.exc import OperationalError

from catalog.auth import tokens
from catalog.core import config
from catalog.routes import auth_routes
from catalog.stores.sessions import SessionStore


def _register(client, name='Ada', email='ada@x.com', password='secret1', role='instructor'):
    return client.post(
        '/auth/register',
        data={'name': name, 'email': email, 'password': password, 'role': role},
        follow_redirects=False,
    )


def _login(client, email='ada@x.com', password='secret1'):
    return client.post('/auth/login', data={'email': email, 'password': password}, follow_redirects=False)


def test_register_and_login_forms_render_named_views(client) -> None:
    assert client.get('/auth/register').json() == {'view': 'register', 'title': 'Register'}
    assert client.get('/auth/login').json() == {'view': 'login', 'title': 'Login'}


def test_register_redirects_to_login_without_creating_session(client) -> None:
    response = _register(client)

    assert response.status_code == 302
    assert response.headers['location'] == '/auth/login'
    assert config.SESSION_COOKIE_NAME not in response.cookies


def test_register_duplicate_email_returns_400(client) -> None:
    _register(client)

    response = _register(client, name='Other', email='ADA@x.com')

    assert response.status_code == 400
    assert response.json() == {'detail': 'User with this email already exists.'}


@pytest.mark.parametrize(
    ('form', 'detail'),
    [
        ({'name': 'Ada', 'email': 'ada@x.com', 'password': 'secret1'}, 'Please fill all fields.'),
        ({'name': 'Ada', 'email': 'ada@x.com', 'password': 'abc', 'role': 'student'}, 'Password must be 6 or more characters.'),
        ({'name': 'Ada', 'email': 'ada@x.com', 'password': 'secret1', 'role': 'admin'}, 'A valid role must be selected.'),
    ],
)
def test_register_validation_errors_return_400(client, form, detail) -> None:
    response = client.post('/auth/register', data=form, follow_redirects=False)

    assert response.status_code == 400
    assert response.json() == {'detail': detail}


def test_login_sets_session_cookie_and_redirects_to_dashboard(client) -> None:
    _register(client)

    response = _login(client)

    assert response.status_code == 302
    assert response.headers['location'] == '/dashboard'
    set_cookie = response.headers['set-cookie']
    assert set_cookie.startswith(f'{config.SESSION_COOKIE_NAME}=')
    assert 'HttpOnly' in set_cookie

    dashboard = client.get('/dashboard')
    assert dashboard.status_code == 200
    assert dashboard.json() == {'view': 'dashboard', 'title': 'Dashboard', 'name': 'Ada', 'role': 'instructor'}


def test_wrong_password_and_unknown_email_look_identical(client) -> None:
    _register(client)

    wrong_password = _login(client, password='not-the-password')
    unknown_email = _login(client, email='nobody@x.com')

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {'detail': 'Invalid credentials.'}
    assert 'set-cookie' not in wrong_password.headers
    assert 'set-cookie' not in unknown_email.headers


def test_logout_destroys_session_and_redirects_home(client) -> None:
    _register(client)
    _login(client)
    assert client.get('/dashboard', follow_redirects=False).status_code == 200

    response = client.get('/auth/logout', follow_redirects=False)

    assert response.status_code == 302
    assert response.headers['location'] == '/'
    dashboard = client.get('/dashboard', follow_redirects=False)
    assert dashboard.status_code == 302
    assert dashboard.headers['location'] == '/auth/login'


def test_logout_without_session_still_redirects(client) -> None:
    response = client.get('/auth/logout', follow_redirects=False)

    assert response.status_code == 302


def test_logged_out_cookie_cannot_be_replayed(client) -> None:
    _register(client)
    cookie = _login(client).cookies[config.SESSION_COOKIE_NAME]
    client.get('/auth/logout', follow_redirects=False)

    client.cookies.set(config.SESSION_COOKIE_NAME, cookie)

    assert client.get('/dashboard', follow_redirects=False).status_code == 302


def test_logout_reports_generic_500_when_session_cannot_be_destroyed(client, monkeypatch: pytest.MonkeyPatch) -> None:
    _register(client)
    _login(client)

    def broken(self, token):
        raise OperationalError('DELETE', {}, Exception('database is locked'))

    monkeypatch.setattr(SessionStore, 'destroy', broken)

    response = client.get('/auth/logout', follow_redirects=False)

    assert response.status_code == 500
    assert response.json() == {'detail': 'Could not log out.'}


def test_second_login_invalidates_the_first_session(app, client) -> None:
    _register(client)
    first_cookie = _login(client).cookies[config.SESSION_COOKIE_NAME]

    second_cookie = _login(client).cookies[config.SESSION_COOKIE_NAME]

    sessions = app.state.session_store
    assert sessions.lookup(tokens.read_session_token(first_cookie)) is None
    assert sessions.lookup(tokens.read_session_token(second_cookie)) is not None

    client.cookies.clear()
    client.cookies.set(config.SESSION_COOKIE_NAME, first_cookie)
    assert client.get('/dashboard', follow_redirects=False).status_code == 302


def test_tampered_cookie_is_treated_as_anonymous(client) -> None:
    client.cookies.set(config.SESSION_COOKIE_NAME, 'forged-value')

    response = client.get('/dashboard', follow_redirects=False)

    assert response.status_code == 302
    assert response.headers['location'] == '/auth/login'


def test_health_reports_ok(client) -> None:
    response = client.get('/auth/health')

    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}


def test_health_reports_error_without_detail(client, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(_engine):
        raise OperationalError('SELECT 1', {}, Exception('connection refused'))

    monkeypatch.setattr(auth_routes, 'check_connection', broken)

    response = client.get('/auth/health')

    assert response.status_code == 503
    assert response.json() == {'status': 'error'}


def test_home_is_public(client) -> None:
    assert client.get('/').json() == {'view': 'home', 'title': 'Home'}
