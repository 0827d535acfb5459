"""Screens and layouts shared by the test-suite."""

from screenkit.screen import Columns, Layouts, Rows, Screen
from screenkit.screen.fields import CheckBox, Input, Label


class UserRows(Rows):
    title = 'Profile'

    def fields(self):
        return [
            Input.make('user.name').title('Name').required(),
            Input.make('user.email').type('email').title('Email'),
            CheckBox.make('user.active').placeholder('Active').send_true_or_false(),
        ]


class PasswordRows(Rows):
    title = 'Password'

    def fields(self):
        return [Input.make('password').type('password').title('Password')]

    def can_see(self, repository):
        return bool(repository.get('user.is_admin', False))


class StatsRows(Rows):
    title = 'Stats'

    def fields(self):
        return [Label.make('stats.count').title('Books')]


class SidebarColumns(Columns):
    """Declares its children through a method instead of data."""

    def layouts(self):
        return [StatsRows, 'screens.UserRows']


class UserEditScreen(Screen):
    name = 'Edit user'
    description = 'Profile and security settings'
    permission = 'platform.users'

    def query(self, user_id=None, **params):
        return {
            'user': {
                'id': user_id,
                'name': 'Ada',
                'email': 'ada@example.com',
                'active': True,
                'is_admin': False,
            },
            'stats': {'count': 3},
        }

    def layout(self):
        return [
            Layouts.tabs({
                'Profile': UserRows,
                'Security': PasswordRows,
            }),
            StatsRows().async_('stats'),
        ]

    def async_stats(self, count=0, **params):
        return {'stats': {'count': int(count)}}

    def save(self, user_id=None):
        return 'saved'


class PublicScreen(Screen):
    name = 'Public'

    def query(self, **params):
        return {'stats': {'count': 12}}

    def layout(self):
        return [StatsRows]


class PingScreen(Screen):
    """Async method taking no request parameters."""

    name = 'Ping'

    def layout(self):
        return [StatsRows().async_('ping')]

    def async_ping(self):
        return {'stats': {'count': 1}}
