#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
服务入口与命令行测试
"""

import json

import pytest
from pydantic import ValidationError

import lifekline
from lifekline.__main__ import main
from lifekline.config.env_config import EnvConfig
from lifekline.oracle import LunarPythonOracle, create_oracle
from lifekline.services.life_kline_service import (
    LifeKlineService,
    compute_life_kline,
    compute_paipan,
    to_json,
)
from tests.fixtures.sample_data import BEIJING_NOON_1990, with_changes


class TestComputeFunctions:
    """对外函数测试"""

    def test_compute_paipan_shape(self, fake_oracle, fake_birth_input):
        payload = compute_paipan(fake_birth_input, LifeKlineService(oracle=fake_oracle))
        assert list(payload) == ['paipan']
        paipan = payload['paipan']
        assert set(paipan) == {'input', 'solar', 'lunar', 'four_pillars', 'overall', 'dayun'}
        assert paipan['four_pillars']['day']['stem'] == '甲'
        assert paipan['input']['time'] == {'mode': 'exact', 'hour': 12, 'minute': 0}

    def test_compute_life_kline_shape(self, fake_oracle, fake_birth_input):
        payload = compute_life_kline(fake_birth_input, LifeKlineService(oracle=fake_oracle))
        assert set(payload) == {'paipan', 'kline'}
        assert len(payload['kline']['years']) == 100
        assert set(payload['kline']['insight']) == {
            'overall_trend', 'peaks', 'troughs', 'ten_god_focus', 'total_score', 'summary',
        }

    def test_byte_identical_json(self):
        service = LifeKlineService(oracle=LunarPythonOracle())
        first = to_json(compute_life_kline(BEIJING_NOON_1990, service))
        second = to_json(compute_life_kline(dict(BEIJING_NOON_1990), LifeKlineService()))
        assert first == second
        assert '己巳' in first

    def test_package_exports(self):
        assert lifekline.compute_paipan is compute_paipan
        assert lifekline.compute_life_kline is compute_life_kline

    def test_validation_error_propagates(self, fake_oracle):
        raw = with_changes(BEIJING_NOON_1990, ['gender'], 'x')
        with pytest.raises(ValidationError):
            compute_paipan(raw, LifeKlineService(oracle=fake_oracle))


class TestServiceConfig:
    """按配置构造服务测试"""

    def test_from_config(self):
        config = EnvConfig(environ={'LIFEKLINE_ORACLE': 'lunar_python_basic', 'LIFEKLINE_DAYUN_COUNT': '12'})
        service = LifeKlineService.from_config(config)
        assert service.oracle.name == 'lunar_python_basic'
        assert service.dayun_count == 12

    @pytest.mark.parametrize("oracle_name", ['lunar_python', 'lunar_python_basic'])
    def test_small_dayun_count_still_covers(self, oracle_name):
        """配置的大运步数过小时，1~100 岁仍各有且仅有一步大运"""
        config = EnvConfig(environ={'LIFEKLINE_ORACLE': oracle_name, 'LIFEKLINE_DAYUN_COUNT': '5'})
        paipan = LifeKlineService.from_config(config).paipan(BEIJING_NOON_1990)
        for age in range(1, 101):
            assert sum(1 for p in paipan.dayun if p.contains(age)) == 1

    def test_unknown_oracle(self):
        with pytest.raises(ValueError):
            create_oracle('sxtwl')


class TestCommandLine:
    """命令行测试"""

    @pytest.fixture
    def birth_file(self, tmp_path):
        path = tmp_path / "birth.json"
        path.write_text(json.dumps(BEIJING_NOON_1990, ensure_ascii=False), encoding='utf-8')
        return path

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch, tmp_path):
        for key in ('LIFEKLINE_ORACLE', 'LIFEKLINE_DAYUN_COUNT', 'LIFEKLINE_LOG_LEVEL'):
            monkeypatch.delenv(key, raising=False)
        self.env_file = str(tmp_path / "missing.env")

    def test_paipan_only(self, birth_file, capsys):
        assert main([str(birth_file), '--env-file', self.env_file]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert list(payload) == ['paipan']
        assert payload['paipan']['solar']['corrected_ymd_hms'] == "1990-01-01 11:45:50"

    def test_with_kline(self, birth_file, capsys):
        assert main([str(birth_file), '--kline', '--env-file', self.env_file]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert len(payload['kline']['years']) == 100

    def test_invalid_input_exit_code(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(with_changes(BEIJING_NOON_1990, ['location', 'longitude'], 10)), encoding='utf-8')
        assert main([str(path), '--env-file', self.env_file]) == 2
        assert capsys.readouterr().out == ''

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "nope.json"), '--env-file', self.env_file]) == 2

    def test_invalid_lunar_date_exit_code(self, tmp_path):
        raw = with_changes(BEIJING_NOON_1990, ['calendar'], 'lunar')
        raw = with_changes(raw, ['date'], {'year': 2024, 'month': 1, 'day': 1, 'is_leap_month': True})
        path = tmp_path / "lunar.json"
        path.write_text(json.dumps(raw), encoding='utf-8')
        assert main([str(path), '--env-file', self.env_file]) == 1

    def test_unknown_oracle_exit_code(self, birth_file, monkeypatch, capsys):
        monkeypatch.setenv('LIFEKLINE_ORACLE', 'sxtwl')
        assert main([str(birth_file), '--env-file', self.env_file]) == 2
        assert capsys.readouterr().out == ''
