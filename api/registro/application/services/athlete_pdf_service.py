"""
Exportação da ficha cadastral em PDF.

Gera uma página A4 com:
- Faixa de cabeçalho azul-marinho com título e subtítulo
- Bloco de foto no canto superior direito (quadro "FOTO" quando não há imagem válida)
- Cinco seções: dados pessoais, endereço, vida escolar, saúde e responsabilidade
- Rodapé com data/hora de geração e linha da instituição
"""
import base64
import re
from datetime import datetime
from typing import List, Optional, Tuple

import fitz  # PyMuPDF
from loguru import logger

from registro.domain.entities.athlete import Athlete
from registro.shared.utils.datetime_utils import DateTimeUtils


# --- Página (A4 em pontos; o layout é pensado em milímetros) ---
MM = 72 / 25.4
PAGE_W = 210 * MM
PAGE_H = 297 * MM

# Cores (RGB 0-1)
NAVY = (11 / 255, 30 / 255, 72 / 255)
WHITE = (1, 1, 1)
BLACK = (0, 0, 0)
GRAY = (100 / 255, 100 / 255, 100 / 255)

FONT_REGULAR = "helv"
FONT_BOLD = "hebo"

TITLE = "FICHA CADASTRAL - ATLETA 2026"
SUBTITLE = "Sistema de Gestão Esportiva Integrada"
INSTITUTE_LINE = "© 2026 Instituto Meio do Mundo"
PHOTO_PLACEHOLDER = "FOTO"
EMPTY_HEALTH_VALUE = "Nenhuma"

# Posições em mm
HEADER_HEIGHT = 40
PHOTO_BOX = (160, 45, 200, 95)  # x0, y0, x1, y1
LEFT_X = 10
FOOTER_Y = 285

SECTION_SIZE = 14
BODY_SIZE = 10
FOOTER_SIZE = 8

_DATA_URI = re.compile(r"^data:image/[\w.+-]+;base64,(?P<payload>.+)$", re.DOTALL)


class AthletePdfService:
    """Renderiza a ficha de um atleta; não guarda estado entre chamadas."""

    def render(self, athlete: Athlete, generated_at: Optional[datetime] = None) -> bytes:
        """
        Gera o PDF da ficha.

        Args:
            athlete: Ficha completa
            generated_at: Momento impresso no rodapé (padrão: agora)

        Returns:
            bytes: Conteúdo do PDF
        """
        generated_at = generated_at or DateTimeUtils.now_local()

        doc = fitz.open()
        try:
            page = doc.new_page(width=PAGE_W, height=PAGE_H)

            _draw_header(page)
            _draw_photo(page, athlete.foto_url)

            for title, top, lines in _sections(athlete):
                _draw_section(page, title, top, lines)

            _draw_footer(page, generated_at)
            return doc.tobytes()
        finally:
            doc.close()


# --- Conteúdo ---

def _text(value) -> str:
    return "" if value is None else str(value)


def _sections(a: Athlete) -> List[Tuple[str, float, List[str]]]:
    """Título, posição (mm) e linhas de cada seção, na ordem da ficha."""
    return [
        ("DADOS PESSOAIS", 55, [
            f"Nome: {_text(a.nome_completo)}",
            f"CPF: {_text(a.cpf)}",
            f"Nascimento: {_text(a.data_nascimento)}",
            f"Sexo: {_text(a.sexo)}",
            f"WhatsApp: {_text(a.whatsapp)}",
            f"Peso: {_text(a.peso)}kg | Altura: {_text(a.altura)}m",
            f"Kimono: {_text(a.tam_kimono)} | Calçado: {_text(a.num_calcado)}",
            f"Lado Dominante: {_text(a.lado_dominante)} | Faixa: {_text(a.graduacao_faixa)}",
            f"Número NIS: {_text(a.numero_nis)}",
        ]),
        ("ENDEREÇO", 135, [
            f"{_text(a.logradouro)}, {_text(a.numero)}",
            f"{_text(a.bairro)} - {_text(a.cidade)}/{_text(a.uf)}",
        ]),
        ("VIDA ESCOLAR", 165, [
            f"Escola: {_text(a.escola)}",
            f"Série: {_text(a.serie_ano)} | Turno: {_text(a.turno_estudo)}",
        ]),
        ("SAÚDE & EMERGÊNCIA", 195, [
            f"Restrições: {a.restricao_medica or EMPTY_HEALTH_VALUE}",
            f"Alergias: {a.possui_alergias or EMPTY_HEALTH_VALUE}",
            f"Tipo Sanguíneo: {_text(a.tipo_sanguineo)}",
            f"Emergência: {_text(a.contato_emergencia_nome)} ({_text(a.contato_emergencia_tel)})",
        ]),
        ("RESPONSABILIDADE", 240, [
            f"Responsável: {_text(a.responsavel_legal)}",
            f"CPF Responsável: {_text(a.responsavel_cpf)}",
        ]),
    ]


def decode_photo(foto_url: Optional[str]) -> Optional[bytes]:
    """
    Extrai os bytes de uma foto enviada como data URI.

    URLs remotas não são baixadas; nesse caso, e em qualquer
    conteúdo inválido, retorna None.
    """
    if not foto_url:
        return None
    match = _DATA_URI.match(foto_url.strip())
    if not match:
        return None
    try:
        return base64.b64decode(match.group("payload"), validate=True)
    except ValueError:
        return None


# --- Desenho ---

def _point(x_mm: float, y_mm: float) -> fitz.Point:
    return fitz.Point(x_mm * MM, y_mm * MM)


def _insert_centered(page, x_mm: float, y_mm: float, text: str,
                     fontname: str, fontsize: float, color):
    width = fitz.get_text_length(text, fontname=fontname, fontsize=fontsize)
    page.insert_text(fitz.Point(x_mm * MM - width / 2, y_mm * MM), text,
                     fontname=fontname, fontsize=fontsize, color=color)


def _draw_header(page):
    header = fitz.Rect(0, 0, PAGE_W, HEADER_HEIGHT * MM)
    page.draw_rect(header, color=NAVY, fill=NAVY, width=0)
    _insert_centered(page, 105, 20, TITLE, FONT_BOLD, 22, WHITE)
    _insert_centered(page, 105, 30, SUBTITLE, FONT_REGULAR, 12, WHITE)


def _draw_photo(page, foto_url: Optional[str]):
    """Foto embutida quando decodificável; senão, o quadro com o texto FOTO."""
    x0, y0, x1, y1 = PHOTO_BOX
    rect = fitz.Rect(x0 * MM, y0 * MM, x1 * MM, y1 * MM)

    content = decode_photo(foto_url)
    if content:
        try:
            page.insert_image(rect, stream=content)
            return
        except Exception as exc:  # o MuPDF usa classes de erro diferentes entre versões
            logger.warning(f"Foto inválida na ficha, usando quadro vazio: {exc}")

    page.draw_rect(rect, color=BLACK, width=0.75)
    _insert_centered(page, (x0 + x1) / 2, 70, PHOTO_PLACEHOLDER, FONT_REGULAR, BODY_SIZE, BLACK)


def _draw_section(page, title: str, top_mm: float, lines: List[str]):
    page.insert_text(_point(LEFT_X, top_mm), title,
                     fontname=FONT_BOLD, fontsize=SECTION_SIZE, color=BLACK)
    y = top_mm + 10
    for line in lines:
        page.insert_text(_point(LEFT_X, y), line,
                         fontname=FONT_REGULAR, fontsize=BODY_SIZE, color=BLACK)
        y += 7


def _draw_footer(page, generated_at: datetime):
    stamp = f"Documento gerado eletronicamente em {DateTimeUtils.to_display(generated_at)}"
    page.insert_text(_point(LEFT_X, FOOTER_Y), stamp,
                     fontname=FONT_REGULAR, fontsize=FOOTER_SIZE, color=GRAY)
    _insert_centered(page, 105, FOOTER_Y + 5, INSTITUTE_LINE, FONT_REGULAR, FOOTER_SIZE, GRAY)
