import jwt
import pytest

from conftest import ADMIN_EMAIL, STUDENT_EMAIL, STUDENT_PASSWORD, auth_header, login
from course_booking.core.config import SECRET_KEY
from course_booking.core.security import verify_password
from course_booking.models.user import User


def register_payload(**overrides) -> dict:
    payload = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@mail.com",
        "mobileNo": "09123456789",
        "password": "password123",
    }
    payload.update(overrides)
    return payload


# ---------- check-email ----------

def test_check_email_rejects_value_without_at_sign(client):
    r = client.post("/users/check-email", json={"email": "not-an-email"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid email format"}


def test_check_email_reports_duplicate_with_409(client):
    r = client.post("/users/check-email", json={"email": STUDENT_EMAIL})
    assert r.status_code == 409
    assert r.json() == {"message": "Duplicate email found"}


def test_check_email_reports_free_email_with_404(client):
    r = client.post("/users/check-email", json={"email": "nobody@mail.com"})
    assert r.status_code == 404
    assert r.json() == {"message": "No duplicate email found"}


# ---------- register ----------

def test_register_returns_user_without_password(client, db_session):
    r = client.post("/users/register", json=register_payload())
    assert r.status_code == 201, r.text

    body = r.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == "jane@mail.com"
    assert body["user"]["firstName"] == "Jane"
    assert body["user"]["mobileNo"] == "09123456789"
    assert body["user"]["isAdmin"] is False
    assert "password" not in body["user"]

    stored = db_session.query(User).filter(User.email == "jane@mail.com").one()
    assert stored.password != "password123"
    assert verify_password("password123", stored.password)


def test_register_checks_email_first_and_never_persists(client, db_session):
    before = db_session.query(User).count()

    r = client.post(
        "/users/register",
        json=register_payload(email="janemail.com", mobileNo="123", password="short"),
    )

    assert r.status_code == 400
    assert r.json() == {"message": "Invalid email format"}
    assert db_session.query(User).count() == before


@pytest.mark.parametrize(
    "mobile_no", ["", "0912345678", "091234567890", 9171234567, 91712345678, None]
)
def test_register_rejects_mobile_number_not_an_eleven_character_string(client, mobile_no):
    r = client.post("/users/register", json=register_payload(mobileNo=mobile_no))
    assert r.status_code == 400
    assert r.json() == {"message": "Mobile number is invalid"}


def test_register_mobile_check_runs_before_password_check(client):
    r = client.post(
        "/users/register", json=register_payload(mobileNo="1", password="x")
    )
    assert r.json() == {"message": "Mobile number is invalid"}


def test_register_rejects_short_password(client):
    r = client.post("/users/register", json=register_payload(password="1234567"))
    assert r.status_code == 400
    assert r.json() == {"message": "Password must be atleast 8 characters long"}


def test_register_missing_fields_fall_into_first_rule(client):
    r = client.post("/users/register", json={})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid email format"}


def test_register_same_email_twice_is_stopped_by_storage_constraint(client):
    first = client.post("/users/register", json=register_payload())
    assert first.status_code == 201

    second = client.post("/users/register", json=register_payload(firstName="Other"))
    assert second.status_code == 409
    assert second.json() == {"message": "Duplicate email found"}


# ---------- login ----------

def test_login_returns_access_token_with_identity_claims(client, seed_data):
    r = client.post(
        "/users/login", json={"email": STUDENT_EMAIL, "password": STUDENT_PASSWORD}
    )
    assert r.status_code == 200

    claims = jwt.decode(r.json()["access"], SECRET_KEY, algorithms=["HS256"])
    assert claims["sub"] == str(seed_data["student"])
    assert claims["email"] == STUDENT_EMAIL
    assert claims["isAdmin"] is False


def test_login_wrong_password_returns_false(client):
    r = client.post("/users/login", json={"email": STUDENT_EMAIL, "password": "wrong-pass"})
    assert r.status_code == 200
    assert r.json() is False


def test_login_unknown_email_returns_false_not_404(client):
    r = client.post("/users/login", json={"email": "ghost@mail.com", "password": "whatever1"})
    assert r.status_code == 200
    assert r.json() is False


def test_login_malformed_email_returns_400_false(client):
    r = client.post("/users/login", json={"email": "ghost", "password": "whatever1"})
    assert r.status_code == 400
    assert r.json() is False


# ---------- details ----------

def test_details_blanks_password(client, student_headers):
    r = client.get("/users/details", headers=student_headers)
    assert r.status_code == 200

    body = r.json()
    assert body["email"] == STUDENT_EMAIL
    assert body["firstName"] == "Sam"
    assert body["password"] == ""


def test_details_requires_token(client):
    r = client.get("/users/details")
    assert r.status_code == 401
    assert r.json() == {"auth": "Failed. No Token"}


def test_details_rejects_garbage_token(client):
    r = client.get("/users/details", headers=auth_header("not-a-jwt"))
    assert r.status_code == 401
    assert r.json() == {"auth": "Failed", "message": "Invalid token"}


# ---------- enrollments of a user ----------

def test_get_enrollments_empty_is_404_false(client, student_headers):
    r = client.get("/users/get-enrollments", headers=student_headers)
    assert r.status_code == 404
    assert r.json() is False


def test_get_enrollments_lists_own_enrollments_in_course_order(
    client, student_headers, seed_data
):
    courses = [{"courseId": seed_data["java"]}, {"courseId": seed_data["python"]}]
    r = client.post(
        "/enrollments",
        headers=student_headers,
        json={"enrolledCourses": courses, "totalPrice": 350},
    )
    assert r.status_code == 201

    r = client.get("/users/get-enrollments", headers=student_headers)
    assert r.status_code == 200

    enrollments = r.json()
    assert len(enrollments) == 1
    assert enrollments[0]["userId"] == seed_data["student"]
    assert enrollments[0]["enrolledCourses"] == courses
    assert enrollments[0]["totalPrice"] == 350
    assert enrollments[0]["status"] == "Enrolled"


# ---------- reset-password ----------

def test_reset_password_requires_new_password(client, student_headers):
    r = client.post("/users/reset-password", headers=student_headers, json={})
    assert r.status_code == 400
    assert r.json() == {"message": "New password is required"}


def test_reset_password_replaces_stored_hash(client, student_headers):
    r = client.post(
        "/users/reset-password",
        headers=student_headers,
        json={"newPassword": "brand-new-pass"},
    )
    assert r.status_code == 200
    assert r.json() == {"message": "Password reset successfully"}

    assert login(client, STUDENT_EMAIL, "brand-new-pass")
    old = client.post(
        "/users/login", json={"email": STUDENT_EMAIL, "password": STUDENT_PASSWORD}
    )
    assert old.json() is False


# ---------- profile ----------

def test_update_profile_changes_only_submitted_fields(client, student_headers):
    r = client.put(
        "/users/profile",
        headers=student_headers,
        json={"firstName": "Samantha", "mobileNo": "09990001111"},
    )
    assert r.status_code == 200

    body = r.json()
    assert body["firstName"] == "Samantha"
    assert body["lastName"] == "Student"
    assert body["mobileNo"] == "09990001111"
    assert body["email"] == STUDENT_EMAIL
    assert "password" not in body


def test_update_profile_requires_token(client):
    r = client.put("/users/profile", json={"firstName": "Nobody"})
    assert r.status_code == 401


# ---------- updateAdmin ----------

def test_update_admin_requires_user_id(client, student_headers):
    r = client.put("/users/updateAdmin", headers=student_headers, json={})
    assert r.status_code == 400
    assert r.json() == {"message": "User ID is required"}


def test_update_admin_unknown_user_is_404(client, admin_headers):
    r = client.put("/users/updateAdmin", headers=admin_headers, json={"userId": 999999})
    assert r.status_code == 404
    assert r.json() == {"message": "User not found"}


def test_update_admin_promotes_user(client, admin_headers, seed_data, db_session):
    r = client.put(
        "/users/updateAdmin",
        headers=admin_headers,
        json={"userId": seed_data["student"]},
    )
    assert r.status_code == 200
    assert r.json() == {"message": "User updated to admin successfully"}

    student = db_session.query(User).filter(User.email == STUDENT_EMAIL).one()
    assert student.is_admin is True

    admin = db_session.query(User).filter(User.email == ADMIN_EMAIL).one()
    assert admin.is_admin is True
