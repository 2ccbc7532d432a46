"""Language catalog — static reference data keyed by language code.

Display names resolve through ``get_language_display_name`` so that an
unknown code never breaks a caller: it is shown as the uppercased code.
"""

ENDANGERMENT_STATUSES = (
    'critically_endangered',
    'severely_endangered',
    'definitely_endangered',
    'vulnerable',
    'safe',
)

MAJOR_LANGUAGES = (
    {'code': 'en', 'name': 'English', 'native_name': 'English', 'region': 'Global',
     'country': 'United Kingdom', 'speakers': 1500000000, 'status': 'safe',
     'family': 'Indo-European'},
    {'code': 'hi', 'name': 'Hindi', 'native_name': 'हिन्दी', 'region': 'North India',
     'country': 'India', 'speakers': 600000000, 'status': 'safe',
     'family': 'Indo-European', 'script': 'Devanagari'},
    {'code': 'bn', 'name': 'Bengali', 'native_name': 'বাংলা', 'region': 'Bengal',
     'country': 'Bangladesh', 'speakers': 300000000, 'status': 'safe',
     'family': 'Indo-European', 'script': 'Bengali'},
    {'code': 'es', 'name': 'Spanish', 'native_name': 'Español', 'region': 'Global',
     'country': 'Spain', 'speakers': 500000000, 'status': 'safe',
     'family': 'Indo-European'},
    {'code': 'fr', 'name': 'French', 'native_name': 'Français', 'region': 'Global',
     'country': 'France', 'speakers': 280000000, 'status': 'safe',
     'family': 'Indo-European'},
    {'code': 'de', 'name': 'German', 'native_name': 'Deutsch', 'region': 'Central Europe',
     'country': 'Germany', 'speakers': 100000000, 'status': 'safe',
     'family': 'Indo-European'},
    {'code': 'pt', 'name': 'Portuguese', 'native_name': 'Português', 'region': 'Global',
     'country': 'Portugal', 'speakers': 260000000, 'status': 'safe',
     'family': 'Indo-European'},
    {'code': 'zh', 'name': 'Chinese', 'native_name': '中文', 'region': 'East Asia',
     'country': 'China', 'speakers': 1100000000, 'status': 'safe',
     'family': 'Sino-Tibetan', 'script': 'Chinese characters'},
    {'code': 'ja', 'name': 'Japanese', 'native_name': '日本語', 'region': 'Japan',
     'country': 'Japan', 'speakers': 125000000, 'status': 'safe',
     'family': 'Japonic', 'script': 'Hiragana, Katakana, Kanji'},
    {'code': 'ar', 'name': 'Arabic', 'native_name': 'العربية', 'region': 'Middle East',
     'country': 'Saudi Arabia', 'speakers': 400000000, 'status': 'safe',
     'family': 'Afro-Asiatic', 'script': 'Arabic'},
)

TRIBAL_LANGUAGES = (
    # Indian tribal languages
    {'code': 'gon', 'name': 'Gondi', 'native_name': 'गोंडी', 'region': 'Central India',
     'country': 'India', 'speakers': 2900000, 'status': 'vulnerable',
     'family': 'Dravidian', 'script': 'Devanagari', 'is_tribal': True,
     'description': 'Spoken by the Gond people, one of the largest tribal groups in India'},
    {'code': 'sat', 'name': 'Santali', 'native_name': 'ᱥᱟᱱᱛᱟᱲᱤ', 'region': 'Eastern India',
     'country': 'India', 'speakers': 7368192, 'status': 'safe',
     'family': 'Austroasiatic', 'script': 'Ol Chiki', 'is_tribal': True,
     'description': 'Official language in Jharkhand, spoken by the Santal people'},
    {'code': 'ho', 'name': 'Ho', 'native_name': 'Ho', 'region': 'Jharkhand',
     'country': 'India', 'speakers': 1040000, 'status': 'vulnerable',
     'family': 'Austroasiatic', 'is_tribal': True,
     'description': 'Spoken by the Ho people in Jharkhand and Odisha'},
    {'code': 'brx', 'name': 'Bodo', 'native_name': 'बोडो', 'region': 'Assam',
     'country': 'India', 'speakers': 1350478, 'status': 'vulnerable',
     'family': 'Sino-Tibetan', 'script': 'Devanagari', 'is_tribal': True,
     'description': 'Official language of Bodoland Territorial Region in Assam'},
    {'code': 'kha', 'name': 'Khasi', 'native_name': 'Ka Ktien Khasi', 'region': 'Meghalaya',
     'country': 'India', 'speakers': 1128575, 'status': 'vulnerable',
     'family': 'Austroasiatic', 'script': 'Latin', 'is_tribal': True,
     'description': 'Official language of Meghalaya state'},
    {'code': 'grt', 'name': 'Garo', 'native_name': 'A·chik', 'region': 'Meghalaya',
     'country': 'India', 'speakers': 889000, 'status': 'vulnerable',
     'family': 'Sino-Tibetan', 'script': 'Latin', 'is_tribal': True,
     'description': 'Spoken by the Garo people in Meghalaya and Bangladesh'},
    {'code': 'mni', 'name': 'Manipuri', 'native_name': 'ꯃꯤꯇꯩ ꯂꯣꯟ', 'region': 'Manipur',
     'country': 'India', 'speakers': 1760000, 'status': 'vulnerable',
     'family': 'Sino-Tibetan', 'script': 'Meitei Mayek', 'is_tribal': True,
     'description': 'Official language of Manipur, also known as Meitei'},
    {'code': 'lus', 'name': 'Mizo', 'native_name': 'Mizo ṭawng', 'region': 'Mizoram',
     'country': 'India', 'speakers': 830846, 'status': 'vulnerable',
     'family': 'Sino-Tibetan', 'script': 'Latin', 'is_tribal': True,
     'description': 'Official language of Mizoram state'},
    {'code': 'kru', 'name': 'Kurukh', 'native_name': 'कुड़ुख़', 'region': 'Jharkhand',
     'country': 'India', 'speakers': 2053000, 'status': 'vulnerable',
     'family': 'Dravidian', 'script': 'Devanagari', 'is_tribal': True,
     'description': 'Spoken by the Oraon people across central and eastern India'},
    {'code': 'mjz', 'name': 'Majhi', 'native_name': 'माझी', 'region': 'Nepal/India',
     'country': 'Nepal', 'speakers': 22000, 'status': 'severely_endangered',
     'family': 'Indo-European', 'is_tribal': True,
     'description': 'Spoken by the Majhi people along rivers in Nepal and India'},

    # African indigenous languages
    {'code': 'kho', 'name': 'Khoikhoi', 'native_name': 'Khoekhoegowab', 'region': 'Southern Africa',
     'country': 'Namibia', 'speakers': 200000, 'status': 'severely_endangered',
     'family': 'Khoe-Kwadi', 'is_tribal': True,
     'description': 'Traditional language of the Khoi people with distinctive click consonants'},
    {'code': 'san', 'name': 'San', 'native_name': '!Xóõ', 'region': 'Kalahari',
     'country': 'Botswana', 'speakers': 4200, 'status': 'severely_endangered',
     'family': 'Tuu', 'is_tribal': True,
     'description': 'Ancient hunter-gatherer language with complex click system'},
    {'code': 'had', 'name': 'Hadza', 'native_name': 'Hadzane', 'region': 'Tanzania',
     'country': 'Tanzania', 'speakers': 1000, 'status': 'critically_endangered',
     'family': 'Language isolate', 'is_tribal': True,
     'description': 'Unique click language of the Hadza hunter-gatherers'},

    # Americas
    {'code': 'pig', 'name': 'Pirahã', 'native_name': 'Pirahã', 'region': 'Amazon',
     'country': 'Brazil', 'speakers': 420, 'status': 'critically_endangered',
     'family': 'Mura', 'is_tribal': True,
     'description': 'Amazonian language famous for its unique grammatical properties'},
    {'code': 'nav', 'name': 'Navajo', 'native_name': 'Diné bizaad', 'region': 'Southwest US',
     'country': 'United States', 'speakers': 170000, 'status': 'vulnerable',
     'family': 'Na-Dené', 'is_tribal': True,
     'description': 'Most widely spoken Native American language in the US'},
    {'code': 'che', 'name': 'Cherokee', 'native_name': 'ᏣᎳᎩ ᎦᏬᏂᎯᏍᏗ', 'region': 'Southeast US',
     'country': 'United States', 'speakers': 2000, 'status': 'severely_endangered',
     'family': 'Iroquoian', 'script': 'Cherokee syllabary', 'is_tribal': True,
     'description': 'Historic language with its own writing system'},
    {'code': 'lkt', 'name': 'Lakota', 'native_name': 'Lakȟótiyapi', 'region': 'Great Plains',
     'country': 'United States', 'speakers': 2000, 'status': 'severely_endangered',
     'family': 'Siouan', 'is_tribal': True,
     'description': 'Language of the Lakota people of the Great Plains'},
    {'code': 'iku', 'name': 'Inuktitut', 'native_name': 'ᐃᓄᒃᑎᑐᑦ', 'region': 'Arctic Canada',
     'country': 'Canada', 'speakers': 39000, 'status': 'vulnerable',
     'family': 'Eskimo-Aleut', 'script': 'Canadian Aboriginal syllabics', 'is_tribal': True,
     'description': 'Official language of Nunavut territory'},
    {'code': 'qu', 'name': 'Quechua', 'native_name': 'Runa Simi', 'region': 'Andes',
     'country': 'Peru', 'speakers': 8000000, 'status': 'vulnerable',
     'family': 'Quechuan', 'is_tribal': True,
     'description': 'Ancient language of the Inca Empire, still widely spoken'},

    # Oceania
    {'code': 'wbp', 'name': 'Warlpiri', 'native_name': 'Warlpiri', 'region': 'Central Australia',
     'country': 'Australia', 'speakers': 3000, 'status': 'severely_endangered',
     'family': 'Pama-Nyungan', 'is_tribal': True,
     'description': 'Well-documented Aboriginal language with unique grammar'},
    {'code': 'arb', 'name': 'Arrernte', 'native_name': 'Arrernte', 'region': 'Central Australia',
     'country': 'Australia', 'speakers': 4500, 'status': 'severely_endangered',
     'family': 'Arandic', 'is_tribal': True,
     'description': 'Traditional language of the Alice Springs region'},
    {'code': 'yol', 'name': 'Yolŋu Matha', 'native_name': 'Yolŋu Matha', 'region': 'Northern Australia',
     'country': 'Australia', 'speakers': 4000, 'status': 'severely_endangered',
     'family': 'Pama-Nyungan', 'is_tribal': True,
     'description': 'Language group of Arnhem Land Aboriginal peoples'},
    {'code': 'rap', 'name': 'Rapa Nui', 'native_name': 'Vananga Rapa Nui', 'region': 'Easter Island',
     'country': 'Chile', 'speakers': 5000, 'status': 'severely_endangered',
     'family': 'Polynesian', 'is_tribal': True,
     'description': 'Language of Easter Island with ancient Polynesian roots'},
    {'code': 'mao', 'name': 'Māori', 'native_name': 'Te Reo Māori', 'region': 'New Zealand',
     'country': 'New Zealand', 'speakers': 185000, 'status': 'vulnerable',
     'family': 'Polynesian', 'is_tribal': True,
     'description': 'Official language of New Zealand, undergoing revitalization'},

    # Asia
    {'code': 'ain', 'name': 'Ainu', 'native_name': 'アイヌ・イタㇰ', 'region': 'Hokkaido',
     'country': 'Japan', 'speakers': 10, 'status': 'critically_endangered',
     'family': 'Language isolate', 'is_tribal': True,
     'description': 'Indigenous language of northern Japan, nearly extinct'},
    {'code': 'hmn', 'name': 'Hmong', 'native_name': 'Hmoob', 'region': 'Southeast Asia',
     'country': 'China', 'speakers': 4000000, 'status': 'vulnerable',
     'family': 'Hmong-Mien', 'is_tribal': True,
     'description': 'Language of the Hmong people across Southeast Asia'},
    {'code': 'kar', 'name': 'Karen', 'native_name': 'ကညီကျိာ်', 'region': 'Myanmar/Thailand',
     'country': 'Myanmar', 'speakers': 1000000, 'status': 'vulnerable',
     'family': 'Sino-Tibetan', 'is_tribal': True,
     'description': 'Language group of the Karen people'},

    # Europe
    {'code': 'smi', 'name': 'Sami', 'native_name': 'Sámegiella', 'region': 'Lapland',
     'country': 'Norway', 'speakers': 30000, 'status': 'severely_endangered',
     'family': 'Uralic', 'is_tribal': True,
     'description': 'Indigenous language of the Arctic Sami people'},
    {'code': 'eu', 'name': 'Basque', 'native_name': 'Euskera', 'region': 'Basque Country',
     'country': 'Spain', 'speakers': 750000, 'status': 'vulnerable',
     'family': 'Language isolate', 'is_tribal': True,
     'description': 'Ancient pre-Indo-European language isolate'},
)

ALL_LANGUAGES = MAJOR_LANGUAGES + TRIBAL_LANGUAGES

_LANGUAGES_BY_CODE = {lang['code']: lang for lang in ALL_LANGUAGES}


def get_language_by_code(code):
    """Return the catalog entry for ``code`` or None."""
    language = _LANGUAGES_BY_CODE.get(code)
    return dict(language) if language else None


def get_language_display_name(code):
    """Display name for a language code, falling back to the uppercased code."""
    language = _LANGUAGES_BY_CODE.get(code)
    if language:
        return language['name']
    return (code or '').upper()


def get_major_languages():
    return [dict(lang) for lang in MAJOR_LANGUAGES]


def get_tribal_languages():
    return [dict(lang) for lang in TRIBAL_LANGUAGES]


def get_languages_by_region(region):
    """Languages whose region matches ``region`` (case-insensitive), sorted by name."""
    region = (region or '').strip().lower()
    matches = [dict(lang) for lang in ALL_LANGUAGES if lang['region'].lower() == region]
    return sorted(matches, key=lambda lang: lang['name'])


def search_languages(query, limit=20):
    """Case-insensitive substring search over name and native name."""
    query = (query or '').strip().lower()
    if not query:
        return []
    matches = [
        dict(lang) for lang in ALL_LANGUAGES
        if query in lang['name'].lower() or query in lang['native_name'].lower()
    ]
    matches.sort(key=lambda lang: lang['name'])
    return matches[:limit]
