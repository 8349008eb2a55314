"""
Static catalogue data: the default service list, the title → slug map
used for translations and preview pages, and preview page metadata.

The 31 default services seed an empty ``services`` table; afterwards
the list is managed from the admin panel.  Slugs and preview metadata
are fixed and describe the showcase pages of the public site.
"""

SERVICE_TAGS = ["Design", "Web & Digital", "Konten & Kreatif", "Lain-lain"]
DEFAULT_SERVICE_TAG = "Lain-lain"

# (title, tag, desc, price_awal)
SEED_SERVICES: list[tuple[str, str, str, str]] = [
    # Design
    ("UI Designer", "Design", "UI Designer adalah perancang antarmuka pengguna yang fokus pada tampilan dan interaksi digital. Apa yang bisa saya bantu? Saya bisa mengerjakan desain mockup, wireframe, design system, dan UI untuk web maupun aplikasi agar tampil rapi dan mudah digunakan.", "400 ribu (harga awal)"),
    ("Video Editor", "Design", "Video Editor mengolah footage menjadi konten siap tayang. Apa yang bisa saya bantu? Saya bisa mengerjakan cutting, color grading, subtitle, motion text, dan packaging video untuk sosial media, YouTube, atau presentasi.", "500 ribu (harga awal)"),
    ("Motion Designer", "Design", "Motion Designer membuat elemen visual bergerak (animasi) untuk video, web, atau presentasi. Apa yang bisa saya bantu? Saya bisa mengerjakan motion graphic, kinetic typography, dan animasi singkat untuk branding atau kampanye.", "600 ribu (harga awal)"),
    ("Illustrator", "Design", "Illustrator membuat ilustrasi orisinal untuk berbagai kebutuhan. Apa yang bisa saya bantu? Saya bisa mengerjakan ilustrasi karakter, ikon, infografis, dan artwork untuk konten digital atau cetak.", "500 ribu (harga awal)"),
    ("Editor / Proofreader", "Design", "Editor dan Proofreader memastikan naskah rapi, konsisten, dan bebas typo. Apa yang bisa saya bantu? Saya bisa mengerjakan penyuntingan bahasa Indonesia/Inggris, penyeragaman istilah, dan pengecekan akhir untuk dokumen, artikel, atau script.", "300 ribu (harga awal)"),
    ("UX Designer", "Design", "UX Designer fokus pada pengalaman pengguna: riset, alur pakai, dan usability. Apa yang bisa saya bantu? Saya bisa mengerjakan user flow, wireframe, usability testing, dan rekomendasi perbaikan agar produk digital nyaman dipakai.", "500 ribu (harga awal)"),
    ("Product Designer", "Design", "Product Designer merancang produk digital dari ide sampai eksekusi (UI/UX dan iterasi). Apa yang bisa saya bantu? Saya bisa mengerjakan discovery, konsep fitur, desain layar, dan koordinasi dengan development.", "600 ribu (harga awal)"),
    ("Landing Page Designer", "Design", "Landing Page Designer merancang halaman tunggal yang fokus konversi. Apa yang bisa saya bantu? Saya bisa mengerjakan layout, CTA, dan visual untuk kampanye, produk, atau event agar visitor mudah mengambil aksi.", "450 ribu (harga awal)"),
    ("Modelling", "Design", "Modelling untuk konten visual: foto produk, lookbook, atau konten branding. Apa yang bisa saya bantu? Saya bisa berperan sebagai talent untuk pemotretan atau video singkat sesuai brief dan konsep yang disepakati.", "Sesuai brief (harga awal)"),
    # Web & Digital
    ("Web & Digital", "Web & Digital", "Pembangunan website dan aplikasi web dengan stack modern. Apa yang bisa saya bantu? Saya bisa mengerjakan landing page, website company profile, dan aplikasi web dengan performa tinggi dan tampilan rapi.", "1,5 jt (harga awal)"),
    ("WordPress Developer", "Web & Digital", "WordPress Developer membangun dan mengustomisasi situs berbasis WordPress. Apa yang bisa saya bantu? Saya bisa mengerjakan setup tema, plugin, custom layout, dan integrasi konten agar situs siap dipakai klien.", "800 ribu (harga awal)"),
    ("Fullstack Developer", "Web & Digital", "Fullstack Developer mengerjakan frontend dan backend dalam satu proyek. Apa yang bisa saya bantu? Saya bisa mengerjakan database, API, dan antarmuka pengguna untuk web app dari awal sampai deploy.", "2 jt (harga awal)"),
    ("Backend Developer", "Web & Digital", "Backend Developer membangun server, API, dan logika di belakang layar. Apa yang bisa saya bantu? Saya bisa mengerjakan REST/API, database, autentikasi, dan integrasi pihak ketiga sesuai kebutuhan proyek.", "1,5 jt (harga awal)"),
    ("Frontend Developer", "Web & Digital", "Frontend Developer fokus pada tampilan dan interaksi di browser. Apa yang bisa saya bantu? Saya bisa mengerjakan markup, styling, dan logic di sisi client agar website atau aplikasi web responsif dan aksesibel.", "1,2 jt (harga awal)"),
    ("Mobile App Developer (Android)", "Web & Digital", "Pengembangan aplikasi Android dari konsep sampai publish. Apa yang bisa saya bantu? Saya bisa mengerjakan UI, logic, dan integrasi API untuk aplikasi Android yang siap dipakai atau diunggah ke Play Store.", "2,5 jt (harga awal)"),
    ("Mobile App Developer (iOS)", "Web & Digital", "Pengembangan aplikasi iOS dari konsep sampai publish. Apa yang bisa saya bantu? Saya bisa mengerjakan UI, logic, dan integrasi untuk aplikasi iPhone/iPad yang siap dipakai atau diunggah ke App Store.", "2,5 jt (harga awal)"),
    # Konten & Kreatif
    ("Content Writer", "Konten & Kreatif", "Content Writer menghasilkan tulisan untuk web, blog, dan media. Apa yang bisa saya bantu? Saya bisa mengerjakan artikel, copy landing page, script video, dan konten yang selaras dengan brand dan SEO.", "350 ribu (harga awal)"),
    ("Copywriter", "Konten & Kreatif", "Copywriter fokus pada teks yang menjual dan mengajak aksi. Apa yang bisa saya bantu? Saya bisa mengerjakan headline, CTA, deskripsi produk, dan kampanye iklan yang jelas dan persuasif.", "400 ribu (harga awal)"),
    ("Social Media Manager", "Konten & Kreatif", "Social Media Manager mengelola konten dan interaksi di platform sosial. Apa yang bisa saya bantu? Saya bisa mengerjakan perencanaan konten, copy caption, dan koordinasi posting untuk menjaga konsistensi brand.", "500 ribu (harga awal)"),
    ("Technical Writer", "Konten & Kreatif", "Technical Writer membuat dokumentasi yang mudah dipahami untuk produk atau layanan teknis. Apa yang bisa saya bantu? Saya bisa mengerjakan user guide, dokumentasi API, dan artikel how-to yang terstruktur.", "400 ribu (harga awal)"),
    ("SEO Specialist", "Konten & Kreatif", "SEO Specialist mengoptimalkan konten dan struktur agar mudah ditemukan di mesin pencari. Apa yang bisa saya bantu? Saya bisa mengerjakan riset kata kunci, optimasi on-page, dan rekomendasi konten untuk peringkat lebih baik.", "500 ribu (harga awal)"),
    ("Email Marketer", "Konten & Kreatif", "Email Marketer mengelola kampanye dan nurturance lewat email. Apa yang bisa saya bantu? Saya bisa mengerjakan copy email, segmentasi, dan strategi drip atau newsletter agar engagement terjaga.", "450 ribu (harga awal)"),
    ("Community Manager", "Konten & Kreatif", "Community Manager menjaga interaksi dan keterlibatan di komunitas brand. Apa yang bisa saya bantu? Saya bisa mengerjakan moderasi, jadwal konten, dan engagement strategy di forum atau grup.", "500 ribu (harga awal)"),
    ("Brand Strategist", "Konten & Kreatif", "Brand Strategist merancang posisi dan narasi brand. Apa yang bisa saya bantu? Saya bisa mengerjakan positioning, tone of voice, dan panduan brand agar komunikasi konsisten di semua saluran.", "600 ribu (harga awal)"),
    ("Transcriber", "Konten & Kreatif", "Transcriber mengubah audio atau video menjadi naskah tertulis. Apa yang bisa saya bantu? Saya bisa mengerjakan transkripsi wawancara, podcast, atau meeting dengan format rapi dan siap dipakai.", "300 ribu (harga awal)"),
    ("Localization Specialist", "Konten & Kreatif", "Localization Specialist mengadaptasi konten ke bahasa dan konteks lokal. Apa yang bisa saya bantu? Saya bisa mengerjakan terjemahan, adaptasi budaya, dan penyesuaian konten untuk pasar sasaran.", "400 ribu (harga awal)"),
    # Lain-lain
    ("Photographer", "Lain-lain", "Photographer menghasilkan foto untuk kebutuhan konten atau branding. Apa yang bisa saya bantu? Saya bisa mengerjakan pemotretan produk, dokumentasi event, atau konten visual untuk media sosial sesuai konsep.", "Sesuai paket (harga awal)"),
    ("Videographer", "Lain-lain", "Videographer menangkap footage untuk iklan, dokumentasi, atau konten. Apa yang bisa saya bantu? Saya bisa mengerjakan shooting, pengambilan angle, dan koordinasi dengan editor untuk hasil siap pakai.", "Sesuai paket (harga awal)"),
    ("Data Analyst", "Lain-lain", "Data Analyst mengolah dan menyajikan data untuk keputusan bisnis. Apa yang bisa saya bantu? Saya bisa mengerjakan pengumpulan data, analisis, visualisasi, dan laporan insight yang mudah dipahami.", "800 ribu (harga awal)"),
    ("Project Manager Digital", "Lain-lain", "Project Manager Digital mengoordinasi proyek digital dari planning sampai delivery. Apa yang bisa saya bantu? Saya bisa mengerjakan jadwal, task tracking, komunikasi tim, dan memastikan scope dan deadline tercapai.", "700 ribu (harga awal)"),
    ("Virtual Assistant", "Lain-lain", "Virtual Assistant membantu tugas administratif dan operasional secara daring. Apa yang bisa saya bantu? Saya bisa mengerjakan jadwal, email, riset, dan tugas rutin lainnya agar kamu fokus ke prioritas utama.", "400 ribu (harga awal)"),
]

SERVICE_TITLE_TO_SLUG: dict[str, str] = {
    "UI Designer": "ui_designer",
    "Video Editor": "video_editor",
    "Motion Designer": "motion_designer",
    "Illustrator": "illustrator",
    "Editor / Proofreader": "editor_proofreader",
    "UX Designer": "ux_designer",
    "Product Designer": "product_designer",
    "Landing Page Designer": "landing_page_designer",
    "Modelling": "modelling",
    "Web & Digital": "web_digital",
    "WordPress Developer": "wordpress_developer",
    "Fullstack Developer": "fullstack_developer",
    "Backend Developer": "backend_developer",
    "Frontend Developer": "frontend_developer",
    "Mobile App Developer (Android)": "mobile_app_android",
    "Mobile App Developer (iOS)": "mobile_app_ios",
    "Content Writer": "content_writer",
    "Copywriter": "copywriter",
    "Social Media Manager": "social_media_manager",
    "Technical Writer": "technical_writer",
    "SEO Specialist": "seo_specialist",
    "Email Marketer": "email_marketer",
    "Community Manager": "community_manager",
    "Brand Strategist": "brand_strategist",
    "Transcriber": "transcriber",
    "Localization Specialist": "localization_specialist",
    "Photographer": "photographer",
    "Videographer": "videographer",
    "Data Analyst": "data_analyst",
    "Project Manager Digital": "project_manager_digital",
    "Virtual Assistant": "virtual_assistant",
}

SLUG_TO_TITLE: dict[str, str] = {slug: title for title, slug in SERVICE_TITLE_TO_SLUG.items()}

PREVIEW_TYPES = ("design", "konten", "web", "lain")

# Showcase pages with their own layout, in display order.  The first
# entry is the "Fitur & Demo" slide, the rest are website themes.
CUSTOM_PREVIEWS: list[dict[str, str]] = [
    {"slug": "fitur", "title": "Fitur & Demo", "description": "Yang Anda dapatkan saat order + demo interaktif (chart real-time, seperti game).", "preview_type": "web"},
    {"slug": "game-store", "title": "Game Store Theme", "description": "Modern storefront concept with featured games and bundles.", "preview_type": "web"},
    {"slug": "montessori", "title": "Montessori School Theme", "description": "Landing PAUD/TK dengan pendekatan Montessori, kurikulum terintegrasi.", "preview_type": "web"},
    {"slug": "cafe", "title": "Cafe Theme", "description": "Menu-first landing layout with pricing emphasis.", "preview_type": "web"},
    {"slug": "kostel", "title": "Kostel Theme", "description": "Pricing plan layout with monthly, 6-month, and yearly tiers.", "preview_type": "web"},
]

# slug -> (tag, short description, preview type)
SERVICE_PREVIEW_META: dict[str, tuple[str, str, str]] = {
    "ui_designer": ("Design", "Contoh mockup, wireframe, dan design system.", "design"),
    "video_editor": ("Design", "Contoh reel, cutting, color grading, motion text.", "design"),
    "motion_designer": ("Design", "Contoh animasi, kinetic typography, motion graphic.", "design"),
    "illustrator": ("Design", "Contoh ilustrasi karakter, ikon, infografis.", "design"),
    "editor_proofreader": ("Design", "Contoh sebelum-sesudah penyuntingan naskah.", "design"),
    "ux_designer": ("Design", "Contoh user flow, wireframe, usability.", "design"),
    "product_designer": ("Design", "Contoh case study dan layar produk.", "design"),
    "landing_page_designer": ("Design", "Contoh mockup landing dengan CTA.", "design"),
    "modelling": ("Design", "Contoh foto atau video sample.", "design"),
    "web_digital": ("Web & Digital", "Template website & demo fitur.", "web"),
    "wordpress_developer": ("Web & Digital", "Contoh tema atau custom layout.", "web"),
    "fullstack_developer": ("Web & Digital", "Contoh arsitektur atau demo app.", "web"),
    "backend_developer": ("Web & Digital", "Contoh API atau struktur backend.", "web"),
    "frontend_developer": ("Web & Digital", "Contoh komponen atau landing.", "web"),
    "mobile_app_android": ("Web & Digital", "Contoh layar atau flow app Android.", "web"),
    "mobile_app_ios": ("Web & Digital", "Contoh layar atau flow app iOS.", "web"),
    "content_writer": ("Konten & Kreatif", "Contoh artikel atau copy landing.", "konten"),
    "copywriter": ("Konten & Kreatif", "Contoh headline, CTA, deskripsi produk.", "konten"),
    "social_media_manager": ("Konten & Kreatif", "Contoh grid post atau jadwal konten.", "konten"),
    "technical_writer": ("Konten & Kreatif", "Contoh dokumentasi atau user guide.", "konten"),
    "seo_specialist": ("Konten & Kreatif", "Contoh laporan kata kunci atau on-page.", "konten"),
    "email_marketer": ("Konten & Kreatif", "Contoh template email atau drip.", "konten"),
    "community_manager": ("Konten & Kreatif", "Contoh jadwal dan engagement.", "konten"),
    "brand_strategist": ("Konten & Kreatif", "Contoh positioning dan tone of voice.", "konten"),
    "transcriber": ("Konten & Kreatif", "Contoh halaman transkrip.", "konten"),
    "localization_specialist": ("Konten & Kreatif", "Contoh teks sumber vs terjemahan.", "konten"),
    "photographer": ("Lain-lain", "Contoh galeri foto produk atau event.", "lain"),
    "videographer": ("Lain-lain", "Contoh reel atau cuplikan shooting.", "lain"),
    "data_analyst": ("Lain-lain", "Contoh dashboard atau laporan data.", "lain"),
    "project_manager_digital": ("Lain-lain", "Contoh timeline atau status report.", "lain"),
    "virtual_assistant": ("Lain-lain", "Contoh daftar layanan atau format laporan.", "lain"),
}


def service_slug(title: str) -> str | None:
    return SERVICE_TITLE_TO_SLUG.get(title)


def normalize_service_tag(tag: str | None, default: str = DEFAULT_SERVICE_TAG) -> str:
    """Canonical lane for ``tag``; blank or unknown tags fall back to ``default``."""
    wanted = (tag or "").strip().lower()
    for known in SERVICE_TAGS:
        if known.lower() == wanted:
            return known
    return default
