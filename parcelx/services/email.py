"""
Email service for ParcelX Admin API
Handles SMTP configuration, booking notifications and error reports
"""

import os
import html
import smtplib
import logging
import traceback
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from datetime import date, datetime
from typing import Optional, Tuple, Union

from dotenv import load_dotenv

from parcelx.enums.notification_type import NotificationType
from parcelx.services.email_templates import EMAIL_TEMPLATES, render_template

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_AIRLINE_NAME = "ParcelX Airways"
NOT_AVAILABLE = "N/A"


class EmailDeliveryError(Exception):
    """SMTP refused or failed to deliver a message"""


def _format_date(value) -> str:
    if not value:
        return NOT_AVAILABLE
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value.strftime("%d %b %Y")


def _format_time(value) -> str:
    if not value:
        return NOT_AVAILABLE
    return str(value)[:5]


def _capitalize(value) -> str:
    if not value:
        return ""
    value = getattr(value, "value", value)
    return value[0].upper() + value[1:]


def _money(value) -> str:
    return f"{float(value or 0):.2f}"


def _passengers_html(passengers) -> str:
    if not passengers:
        return '<p style="color: #6b7280;">No passenger details available</p>'

    blocks = []
    for i, p in enumerate(passengers):
        border = "border-top: 1px solid #e5e7eb;" if i > 0 else ""
        name = " ".join(
            part
            for part in (p.get("title"), p.get("first_name"), p.get("last_name"))
            if part
        )
        detail = _capitalize(p.get("passenger_type")) or "Adult"
        if p.get("passport_number"):
            detail += " &bull; Passport: " + html.escape(str(p["passport_number"]))
        blocks.append(
            f'<div style="padding: 10px 0; {border}">'
            f'<p style="margin: 0; font-weight: bold;">{html.escape(name)}</p>'
            f'<p style="margin: 5px 0 0 0; color: #6b7280; font-size: 14px;">{detail}</p>'
            "</div>"
        )
    return "".join(blocks)


def build_booking_payload(booking) -> dict:
    """
    Flatten a FlightBooking (with flight, airline, airports and passengers)
    into the plain dict the email templates consume.

    Built inside the request so background sends never touch the session.
    """
    flight = booking.outbound_flight
    flight_data = {}
    if flight is not None:
        flight_data = {
            "flight_number": flight.flight_number,
            "departure_time": flight.departure_time.strftime("%H:%M")
            if flight.departure_time
            else None,
            "arrival_time": flight.arrival_time.strftime("%H:%M")
            if flight.arrival_time
            else None,
            "airline": {"name": flight.airline.name} if flight.airline else None,
            "departure_airport": {
                "city": flight.departure_airport.city,
                "code": flight.departure_airport.code,
            }
            if flight.departure_airport
            else None,
            "arrival_airport": {
                "city": flight.arrival_airport.city,
                "code": flight.arrival_airport.code,
            }
            if flight.arrival_airport
            else None,
        }

    return {
        "booking_reference": booking.booking_reference,
        "eticket_number": booking.eticket_number,
        "departure_date": booking.departure_date.isoformat()
        if booking.departure_date
        else None,
        "return_date": booking.return_date.isoformat() if booking.return_date else None,
        "cabin_class": booking.cabin_class.value if booking.cabin_class else None,
        "total_passengers": booking.total_passengers,
        "total_price": booking.total_price,
        "taxes_fees": booking.taxes_fees,
        "payment_crypto_name": booking.payment_crypto_name,
        "payment_network_type": booking.payment_network_type,
        "contact_email": booking.contact_email,
        "passengers": [
            {
                "title": p.title,
                "first_name": p.first_name,
                "last_name": p.last_name,
                "passenger_type": p.passenger_type.value if p.passenger_type else None,
                "passport_number": p.passport_number,
            }
            for p in booking.passengers
        ],
        "flight": flight_data,
    }


def render_booking_email(
    notification_type: Union[NotificationType, str],
    booking: dict,
    today: Optional[date] = None,
) -> Tuple[str, str]:
    """Return (subject, html) for a booking email. Raises ValueError on unknown type."""
    try:
        notification_type = NotificationType(notification_type)
    except ValueError:
        raise ValueError(f"Unknown email type: {notification_type}")
    template = EMAIL_TEMPLATES[notification_type]

    flight = booking.get("flight") or {}
    airline = flight.get("airline") or {}
    departure = flight.get("departure_airport") or {}
    arrival = flight.get("arrival_airport") or {}
    total_price = float(booking.get("total_price") or 0)
    taxes_fees = float(booking.get("taxes_fees") or 0)

    if booking.get("payment_crypto_name"):
        payment_method = (
            f"{booking['payment_crypto_name']} ({booking.get('payment_network_type') or ''})"
        )
    else:
        payment_method = "Crypto"

    data = {
        "booking_reference": booking.get("booking_reference"),
        "eticket_number": booking.get("eticket_number") or "Pending",
        "issue_date": _format_date(today or datetime.utcnow().date()),
        "departure_date": _format_date(booking.get("departure_date")),
        "return_date": _format_date(booking.get("return_date")),
        "cabin_class": _capitalize(booking.get("cabin_class")),
        "total_passengers": booking.get("total_passengers"),
        "total_price": _money(total_price),
        "base_fare": _money(total_price - taxes_fees),
        "taxes_fees": _money(taxes_fees),
        "payment_method": payment_method,
        "airline_name": airline.get("name") or DEFAULT_AIRLINE_NAME,
        "flight_number": flight.get("flight_number") or NOT_AVAILABLE,
        "departure_city": departure.get("city") or NOT_AVAILABLE,
        "departure_code": departure.get("code") or "",
        "departure_time": _format_time(flight.get("departure_time")),
        "arrival_city": arrival.get("city") or NOT_AVAILABLE,
        "arrival_code": arrival.get("code") or "",
        "arrival_time": _format_time(flight.get("arrival_time")),
    }
    data = {
        key: html.escape(str(value)) if value is not None else None
        for key, value in data.items()
    }
    # Already markup
    data["passengers_list"] = _passengers_html(booking.get("passengers") or [])

    subject = html.unescape(render_template(template["subject"], data))
    return subject, render_template(template["html"], data)


class EmailService:
    """Service for sending emails via SMTP"""

    def __init__(self):
        self.smtp_host = os.getenv("SMTP_HOST")
        self.smtp_port = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_user = os.getenv("SMTP_USER")
        self.smtp_pass = os.getenv("SMTP_PASS")
        self.smtp_use_tls = os.getenv("SMTP_USE_TLS", "true").lower() in {
            "1",
            "true",
            "yes",
        }
        self.flights_from = os.getenv("SMTP_FROM_FLIGHTS") or self.smtp_user
        self.from_addr = os.getenv("ERROR_FROM", "errors@parcelx.local")
        self.to_addrs = [
            addr.strip()
            for addr in os.getenv("ERROR_TO", "").split(",")
            if addr.strip()
        ]

    def can_send(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_pass)

    def is_configured(self) -> bool:
        """Check if error reporting is properly configured"""
        return self.can_send() and bool(self.to_addrs)

    def _connect(self) -> smtplib.SMTP:
        # Port 465 is implicit TLS, anything else upgrades with STARTTLS
        if self.smtp_port == 465:
            server = smtplib.SMTP_SSL(self.smtp_host, self.smtp_port)
        else:
            server = smtplib.SMTP(self.smtp_host, self.smtp_port)
            if self.smtp_use_tls:
                server.starttls()
        server.login(self.smtp_user, self.smtp_pass)
        return server

    def test_connection(self) -> dict:
        """Test SMTP connection and return detailed results"""
        result = {
            "config": {
                "smtp_host": self.smtp_host,
                "smtp_port": self.smtp_port,
                "smtp_user": self.smtp_user,
                "smtp_pass_length": len(self.smtp_pass) if self.smtp_pass else 0,
                "smtp_use_tls": self.smtp_use_tls,
                "flights_from": self.flights_from,
                "to_addrs": self.to_addrs,
            },
            "tests": {},
        }

        try:
            logger.info("Testing SMTP connection...")
            server = self._connect()
            result["tests"]["login"] = "Login successful"
            server.quit()
            result["tests"]["disconnect"] = "Disconnected successfully"
            result["status"] = "ok"

        except smtplib.SMTPAuthenticationError as e:
            result["tests"]["login"] = f"Authentication failed: {e}"
            result["status"] = "SMTP authentication failed"
            logger.error(f"SMTP auth error: {e}")

        except (smtplib.SMTPException, OSError) as e:
            result["tests"]["smtp_error"] = f"SMTP error: {e}"
            result["status"] = "SMTP configuration error"
            logger.error(f"SMTP error: {e}")

        return result

    def send_html(self, to_email: str, subject: str, html_content: str, from_addr=None):
        """Send one HTML message. Raises EmailDeliveryError on any SMTP failure."""
        if not self.can_send():
            raise EmailDeliveryError("SMTP is not configured")

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = from_addr or self.flights_from
        msg["To"] = to_email
        msg.attach(MIMEText(html_content, "html", "utf-8"))

        try:
            server = self._connect()
            try:
                server.send_message(msg)
            finally:
                server.quit()
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(str(e)) from e

    def send_booking_email(
        self, to_email: str, notification_type, booking: dict
    ) -> None:
        """
        Render and send a booking notification

        Raises:
            ValueError: unknown notification type
            EmailDeliveryError: SMTP failure
        """
        subject, html_content = render_booking_email(notification_type, booking)
        self.send_html(to_email, subject, html_content)
        logger.info(
            f"Booking email '{NotificationType(notification_type).value}' for "
            f"{booking.get('booking_reference')} sent to {to_email}"
        )

    def dispatch_booking_email(
        self, to_email: Optional[str], notification_type, booking: dict
    ) -> bool:
        """
        Best-effort variant used after a workflow transition has committed.
        Never raises; returns whether the message went out.
        """
        if not to_email:
            logger.warning(
                f"Booking {booking.get('booking_reference')} has no recipient, "
                "skipping notification"
            )
            return False
        try:
            self.send_booking_email(to_email, notification_type, booking)
            return True
        except (ValueError, EmailDeliveryError) as e:
            logger.error(
                f"Failed to send booking email for {booking.get('booking_reference')}: {e}"
            )
            return False

    def send_error_email(self, error_data: dict) -> bool:
        """
        Send error notification email

        Args:
            error_data: Dictionary containing error information
                - path: Request path
                - method: HTTP method
                - client: Client IP
                - user: Admin email (optional)
                - exception: Exception object
                - timestamp: Error timestamp
        """
        if not self.is_configured():
            logger.warning("Email service not configured, skipping error email")
            return False

        html_content = self._generate_error_html(error_data)
        subject = f"[ParcelX Admin][{os.getenv('ENV', 'development')}] ERROR"
        try:
            for to_addr in self.to_addrs:
                self.send_html(to_addr, subject, html_content, from_addr=self.from_addr)
        except EmailDeliveryError as e:
            logger.error(f"Failed to send error email: {e}")
            return False

        logger.info(f"Error email sent successfully to {', '.join(self.to_addrs)}")
        return True

    def _generate_error_html(self, error_data: dict) -> str:
        """Generate HTML content for error email"""
        path = error_data.get("path", "Unknown")
        method = error_data.get("method", "Unknown")
        client = error_data.get("client", "Unknown")
        user = error_data.get("user") or "Anonymous"
        exception = error_data.get("exception")
        timestamp = error_data.get(
            "timestamp", datetime.utcnow().strftime("%Y-%m-%d %H:%M:%S")
        )

        if exception is not None:
            tb_lines = traceback.format_exception(
                type(exception), exception, exception.__traceback__
            )
            traceback_html = "".join(
                f'<div class="line">{html.escape(line.rstrip())}</div>'
                for line in tb_lines
                if line.strip()
            )
        else:
            traceback_html = '<div class="line">No traceback available</div>'

        env = os.getenv("ENV", "development").upper()

        return f"""
        <!DOCTYPE html>
        <html>
        <head>
            <meta charset="UTF-8">
            <style>
                body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px; background-color: #f8f9fa; }}
                .container {{ max-width: 800px; margin: 0 auto; background: white; border-radius: 8px; overflow: hidden; }}
                .header {{ background: #c82333; color: white; padding: 20px; text-align: center; }}
                .content {{ padding: 20px; }}
                .info-label {{ font-weight: 600; color: #495057; font-size: 12px; text-transform: uppercase; }}
                .info-value {{ color: #212529; font-size: 14px; margin: 4px 0 12px 0; word-break: break-all; }}
                .traceback {{ background: #1e1e1e; color: #d4d4d4; padding: 20px; border-radius: 6px; font-family: monospace; font-size: 12px; white-space: pre-wrap; }}
                .footer {{ padding: 15px; text-align: center; color: #6c757d; font-size: 12px; }}
            </style>
        </head>
        <body>
            <div class="container">
                <div class="header">
                    <h1>Error Report</h1>
                    <div>ParcelX Admin API &bull; {env}</div>
                </div>
                <div class="content">
                    <div class="info-label">Time</div>
                    <div class="info-value">{timestamp} UTC</div>
                    <div class="info-label">Endpoint</div>
                    <div class="info-value">{html.escape(str(method))} {html.escape(str(path))}</div>
                    <div class="info-label">Admin</div>
                    <div class="info-value">{html.escape(str(user))}</div>
                    <div class="info-label">Client IP</div>
                    <div class="info-value">{html.escape(str(client))}</div>
                    <h3 style="color: #dc3545;">Stack Trace</h3>
                    <div class="traceback">{traceback_html}</div>
                </div>
                <div class="footer">Generated automatically by the application error handler</div>
            </div>
        </body>
        </html>
        """


# Global email service instance
email_service = EmailService()
