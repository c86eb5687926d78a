from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Any, Sequence

import pandas as pd

from converters import CaseConversionError, build_colunas_labels, get_conversor
import util

logger = logging.getLogger(__name__)

_MODOS_ERRO = ("raise", "blank")

# Globals used by worker processes
_WORK_COLUNAS: list[tuple[int, str, str]] = []
_WORK_OPCOES: dict[str, Any] = {}


def _init_worker(colunas, opcoes):
    """Initializer for worker processes."""
    global _WORK_COLUNAS, _WORK_OPCOES
    _WORK_COLUNAS = colunas
    _WORK_OPCOES = opcoes


def _converte_celula(valor: str, estilo: str, *, sem_acentos: bool = False, em_erro: str = "raise") -> str:
    if not valor.strip():
        return ""
    if sem_acentos:
        valor = util.sem_acento(valor)
    try:
        return get_conversor(estilo)(valor)
    except CaseConversionError as exc:
        if em_erro == "raise":
            raise
        logger.warning("Valor %r não convertido para %s: %s", valor, estilo, exc)
        return ""


def _converte_linha(row: tuple, colunas, opcoes) -> list:
    convertidos = [_converte_celula(str(row[idx]), estilo, **opcoes) for idx, estilo, _ in colunas]
    return list(row) + convertidos


def _process_row(row: tuple) -> list:
    """Process a single CSV row (tuple of values)."""
    return _converte_linha(row, _WORK_COLUNAS, _WORK_OPCOES)


def _valida_plano(colunas: Sequence[tuple[int, str, str]], total_colunas: int, em_erro: str) -> None:
    if em_erro not in _MODOS_ERRO:
        raise ValueError(f"Modo de erro '{em_erro}' inválido; use um de: {', '.join(_MODOS_ERRO)}")
    for idx, estilo, _ in colunas:
        get_conversor(estilo)
        if not 0 <= idx < total_colunas:
            raise ValueError(f"Coluna {idx} fora do intervalo (0..{total_colunas - 1})")


def converter_serie(
    serie: pd.Series,
    estilo: str,
    *,
    sem_acentos: bool = False,
    em_erro: str = "raise",
) -> pd.Series:
    """Converte todos os valores de ``serie`` para ``estilo``; vazios continuam vazios."""
    if em_erro not in _MODOS_ERRO:
        raise ValueError(f"Modo de erro '{em_erro}' inválido; use um de: {', '.join(_MODOS_ERRO)}")
    get_conversor(estilo)
    return serie.fillna("").astype(str).map(
        lambda v: _converte_celula(v, estilo, sem_acentos=sem_acentos, em_erro=em_erro)
    )


def processar(
    arquivo_entrada: str,
    arquivo_saida: str,
    colunas: list[tuple[int, str, str]],
    *,
    sep: str = "|",
    sem_acentos: bool = False,
    em_erro: str = "raise",
    progress_cb=None,
    workers: int | None = 1,
) -> None:
    """Converte colunas de um arquivo delimitado para os estilos pedidos.

    ``colunas`` contém ``(idx, estilo, nome)`` onde ``estilo`` é ``"kebab"``,
    ``"camel"`` ou ``"dot"`` e ``nome`` é o rótulo da coluna gerada
    (``"<nome> <estilo>"``). O resultado é gravado em ``<arquivo_saida>.csv``
    com o mesmo delimitador ``sep``.

    ``sem_acentos`` translitera os valores para ASCII antes da conversão.
    ``em_erro`` decide o que fazer com valores sem tokens: ``"raise"`` propaga
    o erro, ``"blank"`` grava vazio.

    ``progress_cb`` recebe ``(pct, msg, eta)`` para atualizar uma barra de
    progresso opcional.
    ``workers`` define o número de processos (``None`` usa ``os.cpu_count()``).
    """
    df = pd.read_csv(arquivo_entrada, sep=sep, dtype=str, keep_default_na=False).fillna("")
    _valida_plano(colunas, len(df.columns), em_erro)
    total = len(df)
    opcoes = {"sem_acentos": sem_acentos, "em_erro": em_erro}
    logger.debug("Convertendo %d linhas de %s: %s", total, arquivo_entrada, colunas)
    if progress_cb:
        progress_cb(0, f"0/{total}")

    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        workers = 1

    linhas = []
    start = time.time()
    last_pct = -1
    last_eta_line = 0
    last_eta_time = start
    last_eta = 0.0

    def _reporta(i: int) -> None:
        nonlocal last_pct, last_eta_line, last_eta_time, last_eta
        if not progress_cb:
            return
        pct = int((i + 1) * 100 / total)
        if (i + 1) % 1000 != 0 and i + 1 != total and pct == last_pct:
            return
        now = time.time()
        if (i + 1) % 1000 == 0 or i + 1 == total:
            elapsed = now - last_eta_time
            lines = (i + 1) - last_eta_line
            avg = elapsed / lines if lines else 0
            last_eta = avg * (total - (i + 1))
            last_eta_line = i + 1
        else:
            last_eta = max(0.0, last_eta - (now - last_eta_time))
        last_eta_time = now
        progress_cb(pct, f"{i+1}/{total}", last_eta)
        last_pct = pct

    if workers == 1:
        for i, row in enumerate(df.itertuples(index=False, name=None)):
            linhas.append(_converte_linha(row, colunas, opcoes))
            _reporta(i)
    else:
        rows = list(df.itertuples(index=False, name=None))
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker, initargs=(colunas, opcoes)) as ex:
            for i, linha in enumerate(ex.map(_process_row, rows, chunksize=100)):
                linhas.append(linha)
                _reporta(i)

    if progress_cb and last_pct < 100:
        progress_cb(100, f"{total}/{total}", 0)

    header = list(df.columns) + build_colunas_labels(colunas)
    out_df = pd.DataFrame(linhas, columns=header)
    out_df.to_csv(f"{arquivo_saida}.csv", sep=sep, index=False)
    logger.debug("Arquivo %s.csv gravado com %d linhas", arquivo_saida, len(out_df))
