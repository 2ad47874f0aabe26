"""
Report email delivery via Resend.

Sending is best-effort: a failed email is logged and never fails the
generation request that triggered it.
"""

import logging

import resend
from markupsafe import Markup

from config import settings
from templating import render_fragment

logger = logging.getLogger(__name__)


def send_report_email(email: str, company_name: str, report_html: str) -> bool:
    """
    Email the sanitized report to the prospect.

    Args:
        email: Recipient address from the submission
        company_name: Used in the subject line
        report_html: Sanitized report fragment

    Returns:
        True if Resend accepted the email, False if disabled or failed
    """
    if not settings.email_enabled:
        logger.info("RESEND_API_KEY not set; skipping report email")
        return False

    resend.api_key = settings.RESEND_API_KEY

    params = {
        "from": settings.RESEND_FROM,
        "to": [email],
        "subject": f"Your B2B Cold Email Campaigns for {company_name}",
        "html": render_fragment(
            "email_report.html",
            company_name=company_name,
            report_html=Markup(report_html),
        ),
    }

    try:
        response = resend.Emails.send(params)
    except Exception as e:
        logger.error(f"Failed to send report email to {email}: {str(e)}")
        return False

    message_id = response.get("id") if isinstance(response, dict) else None
    logger.info(f"Report email sent to {email} (id={message_id})")
    return True
