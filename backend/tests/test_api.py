"""HTTP 엔드포인트 통합 테스트"""
from datetime import datetime, timedelta

import pytest

from domain.enums import OrderStatus
from infrastructure.auth.jwt_service import create_access_token, create_refresh_token
from tests.conftest import PASSWORD


def auth(user_id: int) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}


def callback(order_code, status="PAID", cancel=False):
    return {"code": "00", "id": "2e4acf1083304877bf1a8c108b30cccd", "cancel": cancel,
            "status": status, "orderCode": order_code}


async def create_order(client, user_id, **overrides):
    body = {"userId": user_id, "amount": 50000, "description": "VIP"}
    body.update(overrides)
    return await client.post("/api/v1/order/create", json=body, headers=auth(user_id))


class TestAuthApi:

    async def test_signup_signin_me(self, client):
        response = await client.post("/api/v1/auth/signup", json={
            "email": "new@example.com", "password": "abc123", "confirmPassword": "abc123"})
        assert response.status_code == 201
        assert response.json()["success"] is True

        response = await client.post("/api/v1/auth/signin", json={"email": "new@example.com", "password": "abc123"})
        assert response.status_code == 200
        token = response.json()["access_token"]

        response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        me = response.json()
        assert me["email"] == "new@example.com"
        assert me["isVip"] is False
        assert me["vipExpireAt"] is None

    async def test_signup_duplicate_email(self, client, make_user):
        await make_user(email="taken@example.com")
        response = await client.post("/api/v1/auth/signup", json={
            "email": "taken@example.com", "password": "abc123", "confirmPassword": "abc123"})
        assert response.status_code == 400

    @pytest.mark.parametrize("body", [
        {"email": "x@example.com", "password": "abc123", "confirmPassword": "abc124"},
        {"email": "x@example.com", "password": "abc", "confirmPassword": "abc"},
        {"email": "not-an-email", "password": "abc123", "confirmPassword": "abc123"},
    ])
    async def test_signup_validation(self, client, body):
        response = await client.post("/api/v1/auth/signup", json=body)
        assert response.status_code == 422

    async def test_signin_wrong_password(self, client, make_user):
        await make_user()
        response = await client.post("/api/v1/auth/signin",
                                     json={"email": "listener@example.com", "password": "wrong-pass"})
        assert response.status_code == 401

    async def test_signin_inactive_account(self, client, make_user):
        await make_user(is_active=False)
        response = await client.post("/api/v1/auth/signin",
                                     json={"email": "listener@example.com", "password": PASSWORD})
        assert response.status_code == 401

    async def test_refresh_issues_new_tokens(self, client, make_user):
        user_id = await make_user()

        response = await client.post("/api/v1/auth/refresh",
                                     json={"refresh_token": create_refresh_token({"sub": user_id})})

        assert response.status_code == 200
        token = response.json()["access_token"]
        me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["id"] == user_id

    async def test_refresh_rejects_access_token(self, client, make_user):
        user_id = await make_user()
        response = await client.post("/api/v1/auth/refresh",
                                     json={"refresh_token": create_access_token({"sub": user_id})})
        assert response.status_code == 401

    async def test_refresh_rejects_inactive_account(self, client, make_user):
        user_id = await make_user(is_active=False)
        response = await client.post("/api/v1/auth/refresh",
                                     json={"refresh_token": create_refresh_token({"sub": user_id})})
        assert response.status_code == 401

    async def test_refresh_token_is_not_accepted_as_access(self, client, make_user):
        user_id = await make_user()
        token = create_refresh_token({"sub": user_id})
        response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401


class TestOrderApi:

    async def test_create_order(self, client, gateway, make_user, load_order):
        user_id = await make_user()

        response = await client.post(
            "/api/v1/order/create", json={"userId": str(user_id), "amount": 50000, "description": "VIP"},
            headers={**auth(user_id), "Origin": "https://music.example.vn"})

        assert response.status_code == 201
        data = response.json()["data"]
        assert set(data) == {"orderId", "orderCode", "checkoutUrl"}
        order = await load_order(data["orderCode"])
        assert order.status == OrderStatus.PENDING
        assert gateway.calls[0]["return_url"] == "https://music.example.vn/dashboard/payment/success"
        assert gateway.calls[0]["cancel_url"] == "https://music.example.vn/dashboard/payment/cancel"

    async def test_create_requires_token(self, client, make_user):
        user_id = await make_user()
        response = await client.post("/api/v1/order/create",
                                     json={"userId": user_id, "amount": 50000, "description": "VIP"})
        assert response.status_code in (401, 403)

    async def test_create_for_other_account_forbidden(self, client, make_user, count_orders):
        user_id = await make_user()
        other_id = await make_user(email="other@example.com")

        response = await client.post("/api/v1/order/create",
                                     json={"userId": other_id, "amount": 50000, "description": "VIP"},
                                     headers=auth(user_id))

        assert response.status_code == 403
        assert await count_orders() == 0

    async def test_create_while_vip(self, client, make_user):
        user_id = await make_user(vip_expire_at=datetime.utcnow() + timedelta(days=10))
        response = await create_order(client, user_id)
        assert response.status_code == 400

    async def test_create_with_non_positive_amount(self, client, make_user):
        user_id = await make_user()
        response = await create_order(client, user_id, amount=0)
        assert response.status_code == 400

    async def test_gateway_failure(self, client, gateway, make_user, count_orders):
        user_id = await make_user()
        gateway.fail = True

        response = await create_order(client, user_id)

        assert response.status_code == 502
        assert await count_orders() == 0

    async def test_cancel_and_history(self, client, make_user):
        user_id = await make_user()
        code = (await create_order(client, user_id)).json()["data"]["orderCode"]

        response = await client.post("/api/v1/order/cancel", json={"orderCode": code}, headers=auth(user_id))
        assert response.status_code == 200

        response = await client.post("/api/v1/order/cancel", json={"orderCode": code}, headers=auth(user_id))
        assert response.status_code == 400

        response = await client.get("/api/v1/order/history", headers=auth(user_id))
        history = response.json()
        assert history["total"] == 1
        assert history["items"][0]["orderCode"] == code
        assert history["items"][0]["status"] == "CANCELLED"

    @pytest.mark.parametrize("seed_owner", [False, True])
    async def test_cancel_nothing_to_cancel(self, client, make_user, make_order, seed_owner):
        user_id = await make_user()
        if seed_owner:
            other_id = await make_user(email="other@example.com")
            await make_order(other_id, 123)

        response = await client.post("/api/v1/order/cancel", json={"orderCode": 123}, headers=auth(user_id))

        assert response.status_code == 400


class TestPaymentCallbackApi:

    async def test_full_upgrade_flow(self, client, make_user):
        user_id = await make_user()
        code = (await create_order(client, user_id)).json()["data"]["orderCode"]

        response = await client.post("/api/v1/payment/success", json=callback(code))
        assert response.status_code == 200
        assert response.json()["success"] is True

        me = (await client.get("/api/v1/auth/me", headers=auth(user_id))).json()
        assert me["isVip"] is True
        expire_at = datetime.fromisoformat(me["vipExpireAt"])
        assert abs(expire_at - (datetime.utcnow() + timedelta(days=30))) < timedelta(minutes=1)

        # VIP 활성 상태에서는 새 주문 불가
        assert (await create_order(client, user_id)).status_code == 400

    async def test_duplicate_success_callback(self, client, make_user, make_order):
        user_id = await make_user()
        await make_order(user_id, 8001)

        assert (await client.post("/api/v1/payment/success", json=callback(8001))).status_code == 200
        assert (await client.post("/api/v1/payment/success", json=callback(8001))).status_code == 409

    async def test_cancel_callback(self, client, make_user, make_order, load_order):
        user_id = await make_user()
        await make_order(user_id, 8002)

        response = await client.post("/api/v1/payment/cancel", json=callback(8002, "CANCELLED", True))

        assert response.status_code == 200
        assert (await load_order(8002)).status == OrderStatus.CANCELLED

    async def test_unknown_order(self, client):
        response = await client.post("/api/v1/payment/success", json=callback(424242))
        assert response.status_code == 404

    @pytest.mark.parametrize("path,body", [
        ("/api/v1/payment/success", callback(8003, "PAID", True)),
        ("/api/v1/payment/success", callback(8003, "CANCELLED", True)),
        ("/api/v1/payment/cancel", callback(8003, "PAID", False)),
        ("/api/v1/payment/success", {"code": "00", "cancel": False, "status": "PAID", "orderCode": 8003}),
        ("/api/v1/payment/success", callback(8003, cancel="false")),
        ("/api/v1/payment/success", callback(8003, cancel=0)),
        ("/api/v1/payment/success", callback("abc")),
        ("/api/v1/payment/success", callback(8003, status=["PAID"])),
    ])
    async def test_malformed_callback(self, client, make_user, make_order, load_order, load_account, path, body):
        user_id = await make_user()
        await make_order(user_id, 8003)

        response = await client.post(path, json=body)

        assert response.status_code == 400
        assert (await load_order(8003)).status == OrderStatus.PENDING
        assert (await load_account(user_id)).vip_expire_at is None


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
