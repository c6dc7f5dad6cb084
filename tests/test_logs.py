import importlib
import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from bank_account import logs
from bank_account.accounts import Account, InsufficientFundsError


def test_mutations_emit_debug_events():
    with capture_logs() as entries:
        x = Account('x@example.com', 10)
        y = Account('y@example.com')
        x.deposit('2.50')
        x.transfer(5, y)

    events = [entry['event'] for entry in entries]
    assert events == [
        'account_created',
        'account_created',
        'deposit',
        'withdrawal',
        'deposit',
        'transfer',
    ]
    assert all(entry['log_level'] == 'debug' for entry in entries)
    assert entries[2]['amount'] == '2.50'
    assert entries[2]['balance'] == '12.50'
    assert entries[-1]['destination'] == 'y@example.com'


def test_failures_are_raised_not_logged():
    acct = Account('z@example.com', 1)
    with capture_logs() as entries:
        with pytest.raises(InsufficientFundsError):
            acct.withdraw(5)
    assert entries == []


def test_configured_pipeline_writes_json_through_stdlib(caplog):
    with caplog.at_level(logging.DEBUG, logger='bank_account.accounts'):
        Account('json@example.com', 4).deposit('1.25')

    payloads = [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == 'bank_account.accounts'
    ]
    deposit = [p for p in payloads if p['event'] == 'deposit']
    assert len(deposit) == 1
    assert deposit[0]['logger'] == 'bank_account.accounts'
    assert deposit[0]['level'] == 'debug'
    assert deposit[0]['balance'] == '5.25'


def test_import_leaves_structlog_configuration_alone():
    structlog.reset_defaults()
    try:
        importlib.reload(logs)
        assert not structlog.is_configured()
    finally:
        logs.configure_logging()


def test_unconfigured_host_sees_no_output(capsys, caplog):
    structlog.reset_defaults()
    try:
        acct = Account('quiet@example.com', 3)
        acct.deposit(1)
        acct.withdraw(2)
    finally:
        logs.configure_logging()

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == ''
    assert caplog.records == []
