from flask import Blueprint, flash, render_template, redirect, request, url_for
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager, login_user, login_required, logout_user, current_user
from werkzeug.security import generate_password_hash, check_password_hash
import logging

from apoxer.constants import BUILD_VERSION
from apoxer.exceptions import ConflictException, ValidationException
from apoxer.repositories.user_repository import UserRepository

# Retrieve main logger
logger = logging.getLogger("main")

auth_blueprint = Blueprint("auth", __name__)

login_manager = LoginManager()
login_manager.login_view = "auth.login"

limiter = Limiter(key_func=get_remote_address, default_limits=["2000 per day", "300 per hour"])

MIN_PASSWORD_LENGTH = 8


@login_manager.user_loader
def load_user(user_id):
    """Load user for Flask-Login"""
    return UserRepository.get_by_id(user_id)


def safe_next_url(next_url):
    """Only same-site relative paths are accepted as redirect targets"""
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return "/"


def create_user(email, password, username=None, display_name=None):
    """
    Create a login account. Emails are stored lowercased and must be unique.
    """
    email = (email or "").strip().lower()
    if "@" not in email:
        raise ValidationException("A valid email address is required")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationException(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if UserRepository.get_by_email(email):
        raise ConflictException(f"An account already exists for {email}")

    user = UserRepository.create(
        email=email,
        password=generate_password_hash(password, method="pbkdf2:sha256"),
        username=(username or "").strip() or None,
        display_name=(display_name or "").strip() or None,
    )
    logger.info(f"Created user {email}")
    return user


@auth_blueprint.route("/login", methods=["GET", "POST"])
@limiter.limit("20 per minute", methods=["POST"])
def login():
    next_url = request.values.get("next", "")
    if request.method == "GET":
        if current_user.is_authenticated:
            return redirect(safe_next_url(next_url))
        return render_template("auth/login.html", title="Login", next=next_url, build_version=BUILD_VERSION)

    email = request.form.get("email", "")
    password = request.form.get("password", "")
    remember = bool(request.form.get("remember"))

    user = UserRepository.get_by_email(email)

    # take the user-supplied password, hash it, and compare it to the hashed password in the database
    if not user or not check_password_hash(user.password, password):
        logger.warning(f"Incorrect login for {email}")
        flash("Incorrect email or password.", "error")
        return render_template("auth/login.html", title="Login", next=next_url, email=email), 401

    logger.info(f"Successful login for {email}")
    login_user(user, remember=remember)
    return redirect(safe_next_url(next_url))


@auth_blueprint.route("/signup", methods=["GET", "POST"])
@limiter.limit("10 per minute", methods=["POST"])
def signup():
    next_url = request.values.get("next", "")
    if request.method == "GET":
        return render_template("auth/signup.html", title="Sign up", next=next_url)

    try:
        user = create_user(
            request.form.get("email"),
            request.form.get("password"),
            username=request.form.get("username"),
            display_name=request.form.get("display_name"),
        )
    except (ValidationException, ConflictException) as e:
        flash(e.message, "error")
        return render_template(
            "auth/signup.html", title="Sign up", next=next_url, email=request.form.get("email", "")
        ), e.status_code

    login_user(user)
    return redirect(safe_next_url(next_url))


@auth_blueprint.route("/logout")
@login_required
def logout():
    logout_user()
    return redirect(url_for("web.index"))
