"""
API tests for /api/admin

Tests:
- Platform stats and listings
- Admin event management with a named organizer
- Admin guard for regular users
"""

from datetime import datetime, timedelta, timezone

import pytest


def _bearer(token: str) -> dict:
    return {'Authorization': f'Bearer {token}'}


def _in_days(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


@pytest.mark.api
class TestAdminOverview:
    def test_stats(self, client, admin_token, register_organizer, register_user, create_event):
        event = create_event(register_organizer()['token'], price='12.50')
        attendee = register_user(email='fan@example.com')['token']
        registration = client.post(
            '/api/registrations',
            json={'eventId': event['id'], 'ticketQuantity': 2},
            headers=_bearer(attendee),
        ).json()['data']['registration']
        client.post(
            '/api/payments/process',
            json={'registrationId': registration['id'], 'paymentMethod': 'paypal'},
            headers=_bearer(attendee),
        )

        response = client.get('/api/admin/stats', headers=_bearer(admin_token))

        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'stats': {
                'totalUsers': 2,
                'totalEvents': 1,
                'totalRegistrations': 1,
                'totalRevenue': '25.00',
            },
        }

    def test_users_listing(self, client, admin_token, register_user):
        register_user(email='one@example.com')
        register_user(email='two@example.com')

        response = client.get('/api/admin/users', params={'limit': 1}, headers=_bearer(admin_token))

        data = response.json()['data']
        assert len(data['users']) == 1
        assert data['pagination']['total'] == 2
        assert data['pagination']['hasNext'] is True

    @pytest.mark.parametrize('path', ['/api/admin/stats', '/api/admin/users', '/api/admin/events'])
    def test_regular_user_is_refused(self, client, register_user, path: str):
        token = register_user()['token']

        response = client.get(path, headers=_bearer(token))

        assert response.status_code == 403
        assert response.json()['error'] == 'Admin access required'


@pytest.mark.api
class TestAdminEvents:
    def test_create_with_named_organizer(self, client, admin_token):
        response = client.post(
            '/api/admin/events',
            json={
                'name': 'City Gala',
                'venue': 'Town Hall',
                'date': _in_days(20),
                'organizer': 'City Council',
            },
            headers=_bearer(admin_token),
        )

        assert response.status_code == 201
        event = response.json()['data']['event']
        assert event['organizer'] == 'City Council'
        assert event['organizer_id'] is None

    def test_update_any_event(self, client, admin_token, register_organizer, create_event):
        event = create_event(register_organizer()['token'])

        response = client.put(
            f'/api/admin/events/{event["id"]}',
            json={'status': 'cancelled', 'organizer': 'Platform'},
            headers=_bearer(admin_token),
        )

        assert response.status_code == 200
        updated = response.json()['data']['event']
        assert updated['status'] == 'cancelled'
        assert updated['organizer'] == 'Platform'

    def test_delete_with_registrations_is_bad_request(
        self, client, admin_token, register_organizer, register_user, create_event
    ):
        event = create_event(register_organizer()['token'])
        client.post(
            '/api/registrations',
            json={'eventId': event['id']},
            headers=_bearer(register_user(email='fan@example.com')['token']),
        )

        response = client.delete(f'/api/admin/events/{event["id"]}', headers=_bearer(admin_token))

        assert response.status_code == 400
        assert response.json()['error'] == 'Cannot delete event with existing registrations'

    def test_listings_include_every_status(
        self, client, admin_token, register_organizer, create_event
    ):
        token = register_organizer()['token']
        create_event(token, name='Live')
        create_event(token, name='Hidden', status='draft')

        response = client.get(
            '/api/admin/events', params={'status': 'draft'}, headers=_bearer(admin_token)
        )

        assert [e['name'] for e in response.json()['data']['events']] == ['Hidden']
