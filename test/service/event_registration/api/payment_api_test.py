"""
API tests for /api/payments

Tests:
- Simulated processing flips the registration to paid
- Double payment and foreign registrations
- Admin refund appends a negative history row
- Listing and stats
"""

import uuid

import pytest


def _bearer(token: str) -> dict:
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def attendee_token(register_user) -> str:
    return register_user(email='fan@example.com', name='Fan')['token']


@pytest.fixture
def registration(client, register_organizer, attendee_token, create_event) -> dict:
    """A pending two-ticket registration for a 25.00 event"""
    event = create_event(register_organizer()['token'], name='Jazz Night', price='25.00')
    response = client.post(
        '/api/registrations',
        json={'eventId': event['id'], 'ticketQuantity': 2},
        headers=_bearer(attendee_token),
    )
    assert response.status_code == 201, response.text
    return response.json()['data']['registration']


def _pay(client, token: str, registration_id: str, method: str = 'credit_card'):
    return client.post(
        '/api/payments/process',
        json={'registrationId': registration_id, 'paymentMethod': method},
        headers=_bearer(token),
    )


@pytest.mark.api
class TestProcessPayment:
    def test_process_marks_registration_paid(self, client, attendee_token, registration):
        response = _pay(client, attendee_token, registration['id'])

        assert response.status_code == 200
        data = response.json()['data']
        assert data['payment']['amount'] == '50.00'
        assert data['payment']['status'] == 'completed'
        assert data['payment']['payment_reference'].startswith('PAY_')
        assert data['registration']['payment_status'] == 'paid'
        assert data['registration']['payment_reference'] == data['payment']['payment_reference']

    def test_already_paid(self, client, attendee_token, registration):
        _pay(client, attendee_token, registration['id'])

        response = _pay(client, attendee_token, registration['id'])

        assert response.status_code == 409
        assert response.json() == {
            'success': False,
            'error': 'Already paid',
            'message': 'Payment for this registration has already been processed',
        }

    def test_missing_method(self, client, attendee_token, registration):
        response = _pay(client, attendee_token, registration['id'], method='')

        assert response.status_code == 400
        assert response.json()['error'] == 'Payment method is required'

    def test_foreign_registration_looks_missing(self, client, register_user, registration):
        stranger = register_user(email='eve@example.com')['token']

        foreign = _pay(client, stranger, registration['id'])
        missing = _pay(client, stranger, str(uuid.uuid4()))

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json()


@pytest.mark.api
class TestRefund:
    def test_admin_refund(self, client, attendee_token, admin_token, registration):
        """
        Given: a paid registration
        When: an admin refunds the payment
        Then: a negative REFUND_ row is added and the registration is refunded
        """
        payment = _pay(client, attendee_token, registration['id']).json()['data']['payment']

        response = client.post(
            f'/api/payments/{payment["id"]}/refund',
            json={'reason': 'Event rescheduled'},
            headers=_bearer(admin_token),
        )

        assert response.status_code == 200
        refund = response.json()['data']
        assert refund['amount'] == '-50.00'
        assert refund['payment_method'] == 'refund'
        assert refund['status'] == 'refunded'
        assert refund['payment_reference'].startswith('REFUND_')
        detail = client.get(
            f'/api/registrations/{registration["id"]}', headers=_bearer(attendee_token)
        ).json()['data']
        assert detail['payment_status'] == 'refunded'

    def test_refund_without_body(self, client, attendee_token, admin_token, registration):
        payment = _pay(client, attendee_token, registration['id']).json()['data']['payment']

        response = client.post(f'/api/payments/{payment["id"]}/refund', headers=_bearer(admin_token))

        assert response.status_code == 200

    def test_refund_requires_admin(self, client, attendee_token, registration):
        payment = _pay(client, attendee_token, registration['id']).json()['data']['payment']

        response = client.post(
            f'/api/payments/{payment["id"]}/refund', headers=_bearer(attendee_token)
        )

        assert response.status_code == 403
        assert response.json()['error'] == 'Admin access required'

    def test_unknown_payment(self, client, admin_token):
        response = client.post(f'/api/payments/{uuid.uuid4()}/refund', headers=_bearer(admin_token))

        assert response.status_code == 404
        assert response.json()['error'] == 'Payment not found'


@pytest.mark.api
class TestPaymentQueries:
    def test_my_payments(self, client, attendee_token, registration):
        _pay(client, attendee_token, registration['id'])

        response = client.get('/api/payments/my-payments', headers=_bearer(attendee_token))

        assert response.status_code == 200
        payments = response.json()['data']['payments']
        assert [p['event_name'] for p in payments] == ['Jazz Night']
        assert payments[0]['user_email'] == 'fan@example.com'

    def test_stranger_cannot_read_payment(self, client, register_user, attendee_token, registration):
        payment = _pay(client, attendee_token, registration['id']).json()['data']['payment']
        stranger = register_user(email='eve@example.com')['token']

        response = client.get(f'/api/payments/{payment["id"]}', headers=_bearer(stranger))

        assert response.status_code == 403

    def test_stats_split_refunds(self, client, attendee_token, admin_token, registration):
        payment = _pay(client, attendee_token, registration['id']).json()['data']['payment']
        client.post(f'/api/payments/{payment["id"]}/refund', headers=_bearer(admin_token))

        stats = client.get('/api/payments/stats/overview', headers=_bearer(admin_token)).json()[
            'data'
        ]
        listed = client.get(
            '/api/payments', params={'paymentMethod': 'refund'}, headers=_bearer(admin_token)
        ).json()['data']

        assert stats['totalPayments'] == 1
        assert stats['totalRefunds'] == 1
        assert stats['totalAmount'] == '50.00'
        assert stats['refundedAmount'] == '50.00'
        assert stats['netRevenue'] == '0.00'
        assert stats['byMethod'] == {'credit_card': 1}
        assert len(listed['payments']) == 1
