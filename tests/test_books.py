"""
Tests for Books API Endpoints

Tests for /api/v1/books endpoints, including:
- Creating books with author/publisher/tags by id or name
- Inventory counts and the bulk price update
- Delete by ISBN
- Searches

pytest Concepts Used:
- Fixtures: client, sample_book, catalog_books (from conftest.py)
- Parametrize: the same check against several inputs
"""

import pytest
from fastapi import status


def book_payload(**overrides) -> dict:
    """A valid create request; tests override the field under test."""
    payload = {
        "title": "Animal Farm",
        "isbn": "98-765-432",
        "price": "7.50",
        "quantity": 2,
        "category": "fiction",
    }
    payload.update(overrides)
    return payload


class TestListBooks:
    """Tests for GET /api/v1/books/ endpoint."""

    def test_list_books_empty(self, client):
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, sample_book):
        """Books are returned with nested author, publisher and tags."""
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        book = data[0]
        assert book["title"] == "1984"
        assert book["price"] == "9.99"
        assert book["author"]["name"] == "George Orwell"
        assert book["publisher"]["name"] == "Secker & Warburg"
        assert [tag["name"] for tag in book["tags"]] == ["classic"]


class TestCreateBook:
    """Tests for POST /api/v1/books/ endpoint."""

    def test_create_book_by_ids(self, client, sample_author, sample_publisher):
        """Test creating a book referencing author and publisher by id."""
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
            ),
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] > 0
        assert data["isbn"] == "98-765-432"
        assert data["price"] == "7.50"
        assert data["quantity"] == 2
        assert data["author"]["id"] == sample_author.id
        assert data["publisher"]["id"] == sample_publisher.id
        assert data["tags"] == []

    def test_create_book_by_names(self, client, sample_author, sample_publisher):
        """Test creating a book referencing author and publisher by name."""
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                author_name="George Orwell",
                publisher_name="Secker & Warburg",
            ),
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["author"]["id"] == sample_author.id
        assert data["publisher"]["id"] == sample_publisher.id

    def test_create_book_with_tags(self, client, sample_author, sample_publisher, sample_tag):
        """A tag sent both by id and by name is attached once."""
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
                tag_ids=[sample_tag.id],
                tag_names=["classic"],
            ),
        )

        assert response.status_code == status.HTTP_201_CREATED
        tags = response.json()["tags"]
        assert len(tags) == 1
        assert tags[0]["id"] == sample_tag.id

    def test_create_book_missing_author(self, client, sample_publisher):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(publisher_id=sample_publisher.id),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Author information is required (id or name)"

    def test_create_book_unknown_author(self, client, sample_publisher):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(author_id=99999, publisher_id=sample_publisher.id),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Author not found with id: 99999"

    def test_create_book_unknown_publisher_name(self, client, sample_author):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(author_id=sample_author.id, publisher_name="Nobody Press"),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Publisher not found with name: Nobody Press"

    def test_create_book_unknown_tag(self, client, sample_author, sample_publisher):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
                tag_names=["missing"],
            ),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Tag not found with name: missing"

    def test_create_book_duplicate_isbn(self, client, sample_book, sample_author, sample_publisher):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                isbn="12-345-678",
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
            ),
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Book with ISBN already exists: 12-345-678"

    def test_create_book_negative_price(self, client, sample_author, sample_publisher):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                price="-1.00",
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
            ),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Price cannot be negative"

    @pytest.mark.parametrize(
        "price,detail",
        [
            ("123456789.00", "Price cannot exceed 99999999.99"),
            ("9.999", "Price cannot have more than 2 decimal places"),
        ],
    )
    def test_create_book_price_out_of_range(
        self, client, sample_author, sample_publisher, price, detail
    ):
        """Prices that do not fit NUMERIC(10, 2) are rejected with 400, not stored."""
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                price=price,
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
            ),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == detail


class TestBookValidation:
    """ISBN format checks through the API."""

    @pytest.mark.parametrize(
        "isbn,valid",
        [
            ("12-345-678", True),
            ("00-000-000", True),
            ("12345678", False),
            ("123-45-678", False),
            ("ab-cde-fgh", False),
            ("12-345-6789", False),
        ],
    )
    def test_isbn_validation(self, client, sample_author, sample_publisher, isbn, valid):
        response = client.post(
            "/api/v1/books/",
            json=book_payload(
                isbn=isbn,
                author_id=sample_author.id,
                publisher_id=sample_publisher.id,
            ),
        )

        if valid:
            assert response.status_code == status.HTTP_201_CREATED
        else:
            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json()["detail"] == "ISBN must be in the format xx-xxx-xxx"


class TestInventory:
    """Tests for GET /api/v1/books/inventory endpoint."""

    def test_inventory_exact_category(self, client, catalog_books):
        """Only the exact, same-case category is counted."""
        response = client.get("/api/v1/books/inventory", params={"category": "fiction"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"category": "fiction", "count": 3}

    def test_inventory_unknown_category(self, client, catalog_books):
        response = client.get("/api/v1/books/inventory", params={"category": "horror"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["count"] == 0

    def test_inventory_requires_category(self, client):
        response = client.get("/api/v1/books/inventory")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestAdjustPrices:
    """Tests for PUT /api/v1/books/prices endpoint."""

    def test_adjust_prices(self, client, sample_book):
        """Every price is multiplied by 0.1 and rounded to cents."""
        response = client.put("/api/v1/books/prices")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"updated": 1, "factor": "0.1"}

        books = client.get("/api/v1/books/").json()
        assert books[0]["price"] == "1.00"

    def test_adjust_prices_empty_catalog(self, client):
        response = client.put("/api/v1/books/prices")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["updated"] == 0


class TestDeleteBook:
    """Tests for DELETE /api/v1/books/isbn/{isbn} endpoint."""

    def test_delete_book_success(self, client, sample_book):
        response = client.delete("/api/v1/books/isbn/12-345-678")

        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = client.get("/api/v1/books/search/isbn", params={"isbn": "12-345-678"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_keeps_tags(self, client, sample_book, sample_tag):
        client.delete("/api/v1/books/isbn/12-345-678")

        response = client.get(f"/api/v1/tags/{sample_tag.id}")
        assert response.status_code == status.HTTP_200_OK

    def test_delete_book_unknown_isbn(self, client, sample_book):
        """Deleting an unknown ISBN is not an error and changes nothing."""
        response = client.delete("/api/v1/books/isbn/99-999-999")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert len(client.get("/api/v1/books/").json()) == 1


class TestSearchBooks:
    """Tests for GET /api/v1/books/search/* endpoints."""

    def test_search_by_title(self, client, catalog_books):
        """Case-insensitive substring match: "cat" finds "Concatenation" but not "Dog"."""
        response = client.get("/api/v1/books/search/title", params={"title": "cat"})

        assert response.status_code == status.HTTP_200_OK
        titles = [book["title"] for book in response.json()]
        assert titles == ["Concatenation", "The Cat Returns"]
        assert "Dog" not in titles

    def test_search_by_author_name(self, client, catalog_books):
        response = client.get("/api/v1/books/search/author", params={"author_name": "AUSTEN"})

        assert response.status_code == status.HTTP_200_OK
        titles = [book["title"] for book in response.json()]
        assert titles == ["The Cat Returns", "Emma"]

    def test_search_by_category(self, client, catalog_books):
        """Unlike inventory, category search ignores case."""
        response = client.get("/api/v1/books/search/category", params={"category": "fic"})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 4

    def test_search_wildcards_match_literally(self, client, catalog_books):
        """A % in the query is not a wildcard."""
        response = client.get("/api/v1/books/search/title", params={"title": "%"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

        response = client.get("/api/v1/books/search/category", params={"category": "fic_ion"})
        assert response.json() == []

    def test_search_no_match(self, client, catalog_books):
        response = client.get("/api/v1/books/search/title", params={"title": "zebra"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_search_by_isbn(self, client, catalog_books):
        response = client.get("/api/v1/books/search/isbn", params={"isbn": "10-000-001"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Dog"

    def test_search_by_isbn_not_found(self, client):
        response = client.get("/api/v1/books/search/isbn", params={"isbn": "99-999-999"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Book not found with ISBN: 99-999-999"
