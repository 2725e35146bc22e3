"""Integration tests for the Flask API."""

import json

import pytest


def strict_json(response):
    """Parse a response body, failing on NaN and Infinity tokens."""
    return json.loads(
        response.get_data(as_text=True),
        parse_constant=lambda token: pytest.fail(f"non-JSON token {token}"),
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "app": "selectorsmith"}


# ============================================================================
# Selectors
# ============================================================================

class TestSelectorRoutes:
    """Tests for /api/selectors."""

    def test_render(self, client):
        """Parts render in CSS order."""
        response = client.post("/api/selectors/render", json={
            "element": "a",
            "attribute": 'href$=".png"',
            "pseudo_classes": ["focus"],
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data["selector"] == 'a[href$=".png"]:focus'
        assert data["parts"]["element"] == "a"
        assert data["parts"]["classes"] == []

    def test_render_empty(self, client):
        response = client.post("/api/selectors/render", json={})
        assert response.get_json()["selector"] == ""

    def test_render_rejects_wrong_types(self, client):
        response = client.post("/api/selectors/render", json={"classes": "container"})

        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["path"] == "body.classes"

    def test_render_requires_json_object(self, client):
        response = client.post("/api/selectors/render", json=["div"])

        assert response.status_code == 400
        assert response.get_json()["error"]["code"] == "VALIDATION_ERROR"

    def test_combine(self, client):
        response = client.post("/api/selectors/combine", json={
            "left": {"element": "div", "id": "main", "classes": ["container", "draggable"]},
            "combinator": "+",
            "right": {"element": "table", "id": "data"},
        })

        assert response.status_code == 200
        assert response.get_json()["selector"] == "div#main.container.draggable + table#data"

    def test_combine_nested(self, client):
        response = client.post("/api/selectors/combine", json={
            "left": {"element": "table", "id": "data"},
            "combinator": "~",
            "right": {
                "left": {"element": "tr", "pseudo_classes": ["nth-of-type(even)"]},
                "combinator": " ",
                "right": {"element": "td", "pseudo_classes": ["nth-of-type(even)"]},
            },
        })

        assert response.get_json()["selector"] == (
            "table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_unknown_combinator(self, client):
        response = client.post("/api/selectors/combine", json={
            "left": {"element": "a"},
            "combinator": "|",
            "right": {"element": "b"},
        })

        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error["code"] == "INVALID_COMBINATOR"
        assert error["details"]["allowed"] == [" ", "+", "~", ">"]

    def test_combine_missing_fields(self, client):
        response = client.post("/api/selectors/combine", json={"left": {"element": "a"}})

        assert response.status_code == 400
        assert response.get_json()["error"]["details"]["missing"] == ["combinator", "right"]

    def test_list_combinators(self, client):
        response = client.get("/api/selectors/combinators")
        assert response.get_json() == {"combinators": [" ", "+", "~", ">"]}


# ============================================================================
# Shapes and JSON
# ============================================================================

class TestShapeRoutes:
    """Tests for /api/shapes."""

    def test_rectangle(self, client):
        response = client.post("/api/shapes/rectangle", json={"width": 10, "height": 20})

        assert response.status_code == 200
        assert response.get_json() == {"width": 10, "height": 20, "area": 200}

    @pytest.mark.parametrize("body", [
        {"width": "10", "height": 20},
        {"width": True, "height": 20},
    ])
    def test_rectangle_rejects_non_numbers(self, client, body):
        response = client.post("/api/shapes/rectangle", json=body)

        assert response.status_code == 400
        assert response.get_json()["error"]["details"]["field"] == "width"

    def test_rectangle_missing_height(self, client):
        response = client.post("/api/shapes/rectangle", json={"width": 1})
        assert response.get_json()["error"]["details"]["missing"] == ["height"]


class TestJsonRoutes:
    """Tests for /api/json."""

    def test_encode(self, client):
        response = client.post("/api/json/encode", json={"value": {"width": 10, "height": 20}})
        assert response.get_json() == {"json": '{"width":10,"height":20}'}

    def test_encode_null(self, client):
        response = client.post("/api/json/encode", json={"value": None})
        assert response.get_json() == {"json": "null"}

    def test_encode_missing_value(self, client):
        response = client.post("/api/json/encode", json={})
        assert response.status_code == 400

    def test_decode_circle(self, client):
        response = client.post("/api/json/decode", json={"type": "circle", "json": '{"radius":1}'})

        data = response.get_json()
        assert response.status_code == 200
        assert data["fields"] == {"radius": 1}
        assert data["area"] == pytest.approx(3.14159, rel=1e-4)

    def test_decode_without_required_fields(self, client):
        response = client.post("/api/json/decode", json={"type": "rectangle", "json": '{"width":2}'})

        assert response.status_code == 200
        assert response.get_json()["area"] is None

    def test_decode_area_out_of_range(self, client):
        """A radius too large for a float area yields a null area."""
        response = client.post("/api/json/decode", json={
            "type": "circle",
            "json": json.dumps({"radius": 10 ** 400}),
        })

        assert response.status_code == 200
        data = strict_json(response)
        assert data["area"] is None
        assert data["fields"]["radius"] == 10 ** 400

    def test_decode_infinite_field(self, client):
        """Overflowing numbers in the document come back as null."""
        response = client.post("/api/json/decode", json={"type": "circle", "json": '{"radius":1e400}'})

        assert response.status_code == 200
        data = strict_json(response)
        assert data["fields"] == {"radius": None}
        assert data["area"] is None

    def test_decode_unknown_type(self, client):
        response = client.post("/api/json/decode", json={"type": "triangle", "json": "{}"})

        assert response.status_code == 404
        assert response.get_json()["error"]["code"] == "NOT_FOUND"

    def test_decode_malformed_json(self, client):
        response = client.post("/api/json/decode", json={"type": "circle", "json": '{"radius":'})

        assert response.status_code == 400
        assert response.get_json()["error"]["code"] == "INVALID_JSON"

    def test_decode_non_object(self, client):
        response = client.post("/api/json/decode", json={"type": "circle", "json": "[1]"})

        assert response.status_code == 400
        assert response.get_json()["error"]["code"] == "VALIDATION_ERROR"


# ============================================================================
# Polynomial
# ============================================================================

class TestPolynomialRoutes:
    """Tests for /api/polynomial."""

    def test_evaluate(self, client):
        response = client.post("/api/polynomial/evaluate", json={
            "coefficients": [2, 3, 5],
            "x": [0, 2, 3],
        })

        assert response.get_json()["values"] == [5, 19, 32]

    def test_overflow_returns_null(self, client):
        """Values that overflow to infinity are returned as null."""
        response = client.post("/api/polynomial/evaluate", json={
            "coefficients": [1e308, 0],
            "x": [10, 1],
        })

        assert response.status_code == 200
        assert strict_json(response)["values"] == [None, 1e308]

    def test_integer_too_large_for_float_points(self, client):
        response = client.post("/api/polynomial/evaluate", json={
            "coefficients": [10 ** 400, 0],
            "x": [0.5],
        })

        assert response.status_code == 400
        assert response.get_json()["error"]["code"] == "VALIDATION_ERROR"

    def test_no_coefficients(self, client):
        response = client.post("/api/polynomial/evaluate", json={"coefficients": [], "x": [1]})

        assert response.status_code == 400
        assert response.get_json()["error"]["details"]["field"] == "coefficients"

    def test_rejects_strings(self, client):
        response = client.post("/api/polynomial/evaluate", json={"coefficients": ["1"], "x": [1]})
        assert response.status_code == 400


# ============================================================================
# Generic errors
# ============================================================================

class TestErrorHandlers:
    """Tests for HTTP-level error responses."""

    def test_unknown_route(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.get_json()["error"]["code"] == "NOT_FOUND"

    def test_method_not_allowed(self, client):
        response = client.get("/api/shapes/rectangle")

        assert response.status_code == 405
        assert response.get_json()["error"]["code"] == "METHOD_NOT_ALLOWED"

    def test_unexpected_exception(self, app):
        @app.route("/api/boom")
        def boom():
            raise RuntimeError("boom")

        response = app.test_client().get("/api/boom")

        assert response.status_code == 500
        assert response.get_json()["error"]["code"] == "INTERNAL_ERROR"
