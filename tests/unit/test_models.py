"""
Tests for the Order model.
"""

from konduto.client.models import Order, OrderStatus, Recommendation, SerializableOrder


class TestOrder:
    """Test Order serialization contract."""

    def test_unset_fields_are_omitted(self):
        """Test only provided fields are serialized."""
        assert Order(id="1").to_json_dict() == {"id": "1"}

    def test_unknown_fields_round_trip(self):
        """Test fields unknown to the model are kept."""
        data = {
            "id": "ORD-9",
            "total_amount": 10.5,
            "customer": {"id": "c1", "name": "Ana", "email": "ana@example.com"},
            "seller": {"id": "s1"},
        }

        assert Order.from_json_dict(data).to_json_dict() == data

    def test_status_values_from_api_load(self):
        """Test unrecognized status and recommendation strings are accepted."""
        order = Order.from_json_dict({"status": "under_review", "recommendation": "hold"})

        assert order.status == "under_review"
        assert order.recommendation == "hold"

    def test_set_analyze_flag(self):
        order = Order(id="1")
        order.set_analyze_flag(False)

        assert order.to_json_dict() == {"id": "1", "analyze": False}

    def test_is_declined(self):
        assert Order(recommendation=Recommendation.DECLINE.value).is_declined()
        assert not Order(recommendation="review").is_declined()

    def test_satisfies_protocol(self):
        """Test Order implements the serializable order contract."""
        assert isinstance(Order(), SerializableOrder)


class TestEnums:
    """Test enum values match the wire format."""

    def test_order_status_values(self):
        assert OrderStatus.NOT_AUTHORIZED.value == "not_authorized"
        assert OrderStatus("canceled") is OrderStatus.CANCELED

    def test_recommendation_values(self):
        assert [r.value for r in Recommendation] == ["approve", "decline", "review", "none"]


class TestLooseTyping:
    """Test values the API may send in a different JSON type."""

    def test_numeric_id_is_coerced(self):
        assert Order.from_json_dict({"id": 1, "visitor": 99}).to_json_dict() == {
            "id": "1",
            "visitor": "99",
        }

    def test_score_keeps_its_json_type(self):
        assert type(Order.from_json_dict({"score": 50}).score) is int
        assert Order.from_json_dict({"score": 0.31}).score == 0.31
