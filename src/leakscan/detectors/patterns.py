# SPDX-License-Identifier: MIT
"""
Built-in secret pattern library.

Each rule is a plain dict so the same shape can be used for custom rules in
``.leakscan.yml``:
  - name: str (unique rule id, used as Finding.pattern_name)
  - pattern: str (Python regex; group 1, when present, is the secret value)
  - severity: LOW | MEDIUM | HIGH | CRITICAL
  - description: str (human label)

Rules are listed highest severity first. When two rules overlap on a line the
higher severity wins, and for equal severity the one listed first wins.
"""

DEFAULT_RULES = [
    # -- CRITICAL -----------------------------------------------------
    {
        "name": "aws_access_key_id",
        "description": "AWS Access Key ID",
        "pattern": r"\b((?:AKIA|ASIA|ABIA|ACCA)[0-9A-Z]{16})\b",
        "severity": "CRITICAL",
    },
    {
        "name": "aws_secret_access_key",
        "description": "AWS Secret Access Key",
        "pattern": r"(?i)aws.{0,20}?(?:secret|sk).{0,20}?[=:]\s*[\"']?([A-Za-z0-9/+]{40})(?![A-Za-z0-9/+])",
        "severity": "CRITICAL",
    },
    {
        "name": "private_key",
        "description": "Private key block",
        "pattern": r"-----BEGIN (?:RSA |EC |DSA |OPENSSH |PGP |ENCRYPTED )?PRIVATE KEY(?: BLOCK)?-----",
        "severity": "CRITICAL",
    },
    {
        "name": "azure_storage_account_key",
        "description": "Azure Storage account key in a connection string",
        "pattern": r"(?i)AccountKey=([A-Za-z0-9+/]{86}==)",
        "severity": "CRITICAL",
    },
    {
        "name": "github_token",
        "description": "GitHub personal access, OAuth or app token",
        "pattern": r"\b(gh[pousr]_[A-Za-z0-9]{36,255})\b",
        "severity": "CRITICAL",
    },
    {
        "name": "github_fine_grained_pat",
        "description": "GitHub fine-grained personal access token",
        "pattern": r"\b(github_pat_[A-Za-z0-9_]{22,255})\b",
        "severity": "CRITICAL",
    },
    {
        "name": "gitlab_token",
        "description": "GitLab personal access token",
        "pattern": r"\b(glpat-[A-Za-z0-9_-]{20,})",
        "severity": "CRITICAL",
    },
    {
        "name": "stripe_live_secret_key",
        "description": "Stripe live secret or restricted key",
        "pattern": r"\b([sr]k_live_[0-9a-zA-Z]{24,})\b",
        "severity": "CRITICAL",
    },
    {
        "name": "anthropic_api_key",
        "description": "Anthropic API key",
        "pattern": r"\b(sk-ant-[A-Za-z0-9_-]{32,})",
        "severity": "CRITICAL",
    },
    {
        "name": "openai_api_key",
        "description": "OpenAI API key",
        "pattern": r"\b(sk-(?!ant-)(?:proj-|svcacct-|admin-)?[A-Za-z0-9_-]{32,})",
        "severity": "CRITICAL",
    },
    # -- HIGH ---------------------------------------------------------
    {
        "name": "gcp_service_account",
        "description": "Google Cloud service account key file",
        "pattern": r"\"type\"\s*:\s*\"service_account\"",
        "severity": "HIGH",
    },
    {
        "name": "google_api_key",
        "description": "Google API key",
        "pattern": r"\b(AIza[0-9A-Za-z_-]{35})(?![0-9A-Za-z_-])",
        "severity": "HIGH",
    },
    {
        "name": "google_oauth_client_secret",
        "description": "Google OAuth client secret",
        "pattern": r"\b(GOCSPX-[A-Za-z0-9_-]{28})(?![A-Za-z0-9_-])",
        "severity": "HIGH",
    },
    {
        "name": "azure_sas_signature",
        "description": "Azure shared access signature",
        "pattern": r"[?&]sig=([A-Za-z0-9%+/=]{30,})",
        "severity": "HIGH",
    },
    {
        "name": "slack_token",
        "description": "Slack bot, user or app token",
        "pattern": r"\b(xox[abposr]-[A-Za-z0-9-]{10,})",
        "severity": "HIGH",
    },
    {
        "name": "slack_webhook",
        "description": "Slack incoming webhook URL",
        "pattern": r"(https://hooks\.slack\.com/services/T[A-Za-z0-9]+/B[A-Za-z0-9]+/[A-Za-z0-9]{20,})",
        "severity": "HIGH",
    },
    {
        "name": "discord_webhook",
        "description": "Discord webhook URL",
        "pattern": r"(https://(?:ptb\.|canary\.)?discord(?:app)?\.com/api/webhooks/\d+/[A-Za-z0-9_-]{30,})",
        "severity": "HIGH",
    },
    {
        "name": "telegram_bot_token",
        "description": "Telegram bot token",
        "pattern": r"\b(\d{8,10}:AA[0-9A-Za-z_-]{33})(?![0-9A-Za-z_-])",
        "severity": "HIGH",
    },
    {
        "name": "sendgrid_api_key",
        "description": "SendGrid API key",
        "pattern": r"\b(SG\.[A-Za-z0-9_-]{22}\.[A-Za-z0-9_-]{43})(?![A-Za-z0-9_-])",
        "severity": "HIGH",
    },
    {
        "name": "mailgun_api_key",
        "description": "Mailgun API key",
        "pattern": r"\b(key-[0-9a-f]{32})\b",
        "severity": "HIGH",
    },
    {
        "name": "twilio_api_key",
        "description": "Twilio API key SID",
        "pattern": r"\b(SK[0-9a-f]{32})\b",
        "severity": "HIGH",
    },
    {
        "name": "npm_token",
        "description": "npm access token",
        "pattern": r"\b(npm_[A-Za-z0-9]{36})\b",
        "severity": "HIGH",
    },
    {
        "name": "pypi_token",
        "description": "PyPI upload token",
        "pattern": r"\b(pypi-AgEIcHlwaS5vcmc[A-Za-z0-9_-]{50,})",
        "severity": "HIGH",
    },
    {
        "name": "huggingface_token",
        "description": "Hugging Face access token",
        "pattern": r"\b(hf_[A-Za-z0-9]{34,})\b",
        "severity": "HIGH",
    },
    {
        "name": "notion_token",
        "description": "Notion integration token",
        "pattern": r"\b(secret_[A-Za-z0-9]{43}|ntn_[A-Za-z0-9]{46})\b",
        "severity": "HIGH",
    },
    {
        "name": "linear_api_key",
        "description": "Linear API key",
        "pattern": r"\b(lin_(?:api|oauth)_[A-Za-z0-9]{40})\b",
        "severity": "HIGH",
    },
    {
        "name": "sentry_auth_token",
        "description": "Sentry auth token",
        "pattern": r"\b(sntry[su]_[A-Za-z0-9+/=_-]{40,})",
        "severity": "HIGH",
    },
    {
        "name": "shopify_token",
        "description": "Shopify access token",
        "pattern": r"\b(shp(?:at|ca|pa|ss)_[a-fA-F0-9]{32})\b",
        "severity": "HIGH",
    },
    {
        "name": "digitalocean_token",
        "description": "DigitalOcean token",
        "pattern": r"\b(do[opr]_v1_[a-f0-9]{64})\b",
        "severity": "HIGH",
    },
    {
        "name": "heroku_api_key",
        "description": "Heroku API key",
        "pattern": r"(?i)heroku.{0,20}?[=:]\s*[\"']?([0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})\b",
        "severity": "HIGH",
    },
    {
        "name": "database_url_credentials",
        "description": "Database connection string with embedded password",
        "pattern": r"\b(?:postgres(?:ql)?|mysql|mariadb|mssql|mongodb(?:\+srv)?|rediss?|amqps?)://[^\s:/@\"']+:([^\s:@/\"']+)@",
        "severity": "HIGH",
    },
    # -- MEDIUM -------------------------------------------------------
    {
        "name": "stripe_test_secret_key",
        "description": "Stripe test secret key",
        "pattern": r"\b([sr]k_test_[0-9a-zA-Z]{24,})\b",
        "severity": "MEDIUM",
    },
    {
        "name": "jwt",
        "description": "JSON Web Token",
        "pattern": r"\b(eyJ[A-Za-z0-9_-]{10,}\.eyJ[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,})",
        "severity": "MEDIUM",
    },
    {
        "name": "bearer_token",
        "description": "Hardcoded bearer token in an Authorization header",
        "pattern": r"(?i)\bauthorization[\"']?\s*[:=]\s*[\"']?bearer\s+([A-Za-z0-9._~+/=-]{20,})",
        "severity": "MEDIUM",
    },
    {
        "name": "url_basic_auth",
        "description": "HTTP URL with embedded credentials",
        "pattern": r"\bhttps?://[^\s:/@\"']+:([^\s:@/\"']+)@",
        "severity": "MEDIUM",
    },
    {
        "name": "generic_secret_assignment",
        "description": "Quoted value assigned to a secret-like name",
        "pattern": (
            r"(?i)(?<![A-Za-z0-9])(?:api[_-]?key|secret[_-]?key|client[_-]?secret|"
            r"access[_-]?token|auth[_-]?token|secret|token|password|passwd|pwd)"
            r"(?![A-Za-z0-9])[\"']?\s*[:=]\s*[\"']([^\"'\s]{12,})[\"']"
        ),
        "severity": "MEDIUM",
    },
    # -- LOW ----------------------------------------------------------
    {
        "name": "aws_account_id",
        "description": "AWS account ID",
        "pattern": r"(?i)aws_?account_?id[\"']?\s*[:=]\s*[\"']?(\d{12})(?!\d)",
        "severity": "LOW",
    },
    {
        "name": "ssh_private_key_reference",
        "description": "Reference to an SSH private key file",
        "pattern": r"(?<![\w.-])(id_rsa|id_dsa|id_ecdsa|id_ed25519)(?![\w.-])",
        "severity": "LOW",
    },
]
