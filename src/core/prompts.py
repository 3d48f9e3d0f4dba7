"""Catálogo de prompts.

El contenido de los prompts es configuración, pero su *estructura* no: el
parser de secciones espera encabezados con la forma `**Etiqueta:**`, y el
prompt del roteiro lo exige explícitamente.
"""

from __future__ import annotations

from core.domain.language import Language


_PITCH_PROMPTS: dict[Language, str] = {
    Language.PORTUGUESE: (
        "Você é um especialista em startups e capital de risco. Com base na seguinte ideia de negócio, "
        "crie um roteiro de pitch conciso e impactante. O roteiro deve ser estruturado em seções claras, "
        "usando markdown com cabeçalhos (ex: '**Problema:**'). As seções devem incluir: Problema, Solução, "
        "Público-Alvo, Modelo de Negócio, Diferencial Competitivo e Chamada para Ação.\n\n"
        "**Instruções Específicas para a Seção 'Público-Alvo':**\n"
        "Ao descrever o público-alvo, seja extremamente detalhado. Inclua dados demográficos, necessidades "
        "específicas, comportamentos e motivações. O público principal consiste em dois segmentos:\n"
        "1.  **Investidores Individuais:** Pessoas que buscam ativamente as melhores opções de investimento "
        "bancário para otimizar seus rendimentos.\n"
        "2.  **Empreendedores e Acionistas:** Empresários e detentores de ações que estão à procura de novos "
        "negócios promissores para investir.\n\n"
        "Analise como a ideia de negócio atende às necessidades desses dois grupos.\n\n"
        "**Ideia de Negócio Fornecida pelo Usuário:** '{idea}'"
    ),
    Language.ENGLISH: (
        "You are a startup and venture capital expert. Based on the following business idea, write a concise, "
        "high-impact pitch script. Structure it in clear sections using markdown headings (e.g. '**Problem:**'). "
        "The sections must include: Problem, Solution, Target Audience, Business Model, Competitive Advantage "
        "and Call to Action.\n\n"
        "**Specific instructions for the 'Target Audience' section:**\n"
        "Be extremely detailed. Include demographics, specific needs, behaviours and motivations. The main "
        "audience has two segments:\n"
        "1.  **Individual Investors:** People actively looking for the best banking investment options to "
        "improve their returns.\n"
        "2.  **Entrepreneurs and Shareholders:** Business owners and shareholders looking for promising new "
        "ventures to invest in.\n\n"
        "Analyse how the business idea serves the needs of both groups.\n\n"
        "**Business idea provided by the user:** '{idea}'"
    ),
    Language.SPANISH: (
        "Eres un experto en startups y capital de riesgo. Con base en la siguiente idea de negocio, crea un "
        "guion de pitch conciso e impactante. Estructúralo en secciones claras usando markdown con encabezados "
        "(ej: '**Problema:**'). Las secciones deben incluir: Problema, Solución, Público Objetivo, Modelo de "
        "Negocio, Diferencial Competitivo y Llamada a la Acción.\n\n"
        "**Instrucciones específicas para la sección 'Público Objetivo':**\n"
        "Sé extremadamente detallado. Incluye datos demográficos, necesidades específicas, comportamientos y "
        "motivaciones. El público principal tiene dos segmentos:\n"
        "1.  **Inversores Individuales:** Personas que buscan activamente las mejores opciones de inversión "
        "bancaria para optimizar sus rendimientos.\n"
        "2.  **Emprendedores y Accionistas:** Empresarios y accionistas que buscan nuevos negocios "
        "prometedores en los que invertir.\n\n"
        "Analiza cómo la idea de negocio atiende las necesidades de ambos grupos.\n\n"
        "**Idea de negocio proporcionada por el usuario:** '{idea}'"
    ),
}


_LOGO_PROMPTS: dict[Language, str] = {
    Language.PORTUGUESE: (
        "Crie um logotipo para uma startup de tecnologia com base nesta ideia: '{idea}'. O logotipo deve ser "
        "moderno, minimalista, vetorial e icônico. Use uma paleta de cores fortes, mas simples. O design deve "
        "ser adequado para um ícone de aplicativo. Não inclua texto no logotipo."
    ),
    Language.ENGLISH: (
        "Create a logo for a technology startup based on this idea: '{idea}'. The logo must be modern, "
        "minimalist, vector-style and iconic. Use a strong but simple colour palette. The design must work as "
        "an app icon. Do not include any text in the logo."
    ),
    Language.SPANISH: (
        "Crea un logotipo para una startup tecnológica basada en esta idea: '{idea}'. El logotipo debe ser "
        "moderno, minimalista, vectorial e icónico. Usa una paleta de colores fuertes pero simple. El diseño "
        "debe servir como ícono de aplicación. No incluyas texto en el logotipo."
    ),
}


def build_pitch_prompt(idea: str, language: Language = Language.PORTUGUESE) -> str:
    template = _PITCH_PROMPTS.get(language) or _PITCH_PROMPTS[Language.PORTUGUESE]
    # `replace` en vez de `format`: la idea puede traer llaves.
    return template.replace("{idea}", idea)


def build_logo_prompt(idea: str, language: Language = Language.PORTUGUESE) -> str:
    template = _LOGO_PROMPTS.get(language) or _LOGO_PROMPTS[Language.PORTUGUESE]
    return template.replace("{idea}", idea)
