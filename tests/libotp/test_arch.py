from pytest_archon import archrule


def test_hotp_does_not_import_time_based_modules() -> None:
    (
        archrule("hotp-is-leaf")
        .match("libotp.hotp")
        .should_not_import("libotp.totp", "libotp.clock", "libotp.provisioning")
        .check("libotp")
    )


def test_utils_do_not_import_frontend_modules() -> None:
    (
        archrule("utils-are-leaves")
        .match("libotp._utils*")
        .should_not_import("libotp.hotp", "libotp.totp", "libotp.provisioning")
        .check("libotp")
    )
