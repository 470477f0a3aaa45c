"""
API tests for /payment
"""


class TestPaymentsAPI:

    def test_create(self, client, sample_payment_data):
        response = client.post("/payment", json=sample_payment_data)

        assert response.status_code == 201
        data = response.json()
        assert response.headers["location"] == f"/payment/{data['id']}"
        assert float(data["amount"]) == 120.50
        assert data["payment_method"] == "CREDIT_CARD"
        assert data["payment_status"] == "PENDING"
        assert data["customer_id"] == sample_payment_data["customer_id"]

    def test_create_accepts_original_client_field_names(self, client, customer):
        response = client.post(
            "/payment",
            json={"transaction_id": "TX-77", "amount": "5", "payment_method": "CARD", "costumerId": customer.id},
        )

        assert response.status_code == 201
        assert response.json()["customer_id"] == customer.id

    def test_unknown_customer(self, client, sample_payment_data):
        sample_payment_data["customer_id"] = 31337

        response = client.post("/payment", json=sample_payment_data)

        assert response.status_code == 500
        assert response.json()["detail"]["code"] == "REFERENCE_NOT_FOUND"

    def test_duplicate_transaction_id(self, client, sample_payment_data):
        client.post("/payment", json=sample_payment_data)

        response = client.post("/payment", json=sample_payment_data)

        assert response.status_code == 500
        assert response.json()["detail"]["code"] == "CONFLICT"

    def test_invalid_method_is_rejected(self, client, sample_payment_data):
        sample_payment_data["payment_method"] = "BARTER"

        assert client.post("/payment", json=sample_payment_data).status_code == 422

    def test_patch_status(self, client, sample_payment_data):
        payment = client.post("/payment", json=sample_payment_data).json()

        response = client.patch(f"/payment/{payment['id']}", json={"payment_status": "COMPLETED"})

        assert response.status_code == 200
        assert response.json()["payment_status"] == "COMPLETED"
        assert response.json()["transaction_id"] == "TX-0001"

    def test_delete_then_get_is_404(self, client, sample_payment_data):
        location = client.post("/payment", json=sample_payment_data).headers["location"]

        response = client.delete(location)

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(location).status_code == 404
        assert client.get("/payment").json() == []
