"""
Agreement (perjanjian pemberian jasa) PDF generator.

Two templates are available: the 17 article *Perjanjian Jasa
Profesional* (Master Service Agreement) for ``tier == "profesional"``
and the 9 article *Perjanjian Jasa Standar* for everything else.  Both
share the title, the parties block, the payment table and the
signature block.  Documents are rendered with fpdf2 core fonts, so all
text is reduced to latin‑1 first.
"""

import logging
import re
from datetime import datetime
from typing import List, Optional, Tuple

from fpdf import FPDF, XPos, YPos

from ..core.formatting import format_tanggal, nama_bulan, nama_hari
from ..schemas.agreement import AgreementData

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "perjanjian-pemberian-jasa.pdf"
DEFAULT_SLA_RESPONSE_TIME = "1x24 jam kerja"

# (field, value used when the admin leaves it blank)
_PERIOD_DEFAULTS = [
    ("revisi_putaran", "2 (dua)"),
    ("revisi_hari", "7 (tujuh)"),
    ("konfirmasi_hari", "5"),
    ("serah_terima_hari", "7 (tujuh)"),
    ("tanggung_jawab_hari", "14 (empat belas)"),
    ("pemutusan_hari", "14 (empat belas)"),
    ("keterlambatan_hari", "14 (empat belas)"),
]

_REPLACEMENTS = {
    "—": "-",
    "–": "-",
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
}

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")

Article = Tuple[str, List[str]]


def clean(text: str) -> str:
    """Replace typographic punctuation and drop what latin‑1 cannot encode."""
    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)
    return text.encode("latin-1", "replace").decode("latin-1")


def agreement_filename(nomor: str) -> str:
    safe = _UNSAFE_FILENAME_CHARS.sub("", nomor or "")
    return f"{safe}.pdf" if safe else DEFAULT_FILENAME


def apply_defaults(data: AgreementData, now: Optional[datetime] = None) -> AgreementData:
    """Fill blank date and period fields; returns a new model."""
    now = now or datetime.now()
    values = {
        "tanggal": format_tanggal(now),
        "hari": nama_hari(now),
        "bulan": nama_bulan(now),
        "tahun": str(now.year),
        "hari_num": str(now.day),
    }
    values.update(dict(_PERIOD_DEFAULTS))
    updates = {field: value for field, value in values.items() if not getattr(data, field).strip()}
    return data.model_copy(update=updates)


def sample_data(tier: str = "standar") -> AgreementData:
    """Example agreement used by the admin panel to preview the templates."""
    return AgreementData(
        tier=tier,
        nomor_perjanjian="RP-2025-001",
        tempat="Jakarta",
        p1_nama="Rasya",
        p1_alamat="Jakarta, Indonesia",
        p1_email="hello@raspro.co.id",
        p1_telepon="0812-0000-0000",
        p2_nama="PT Contoh Klien",
        p2_jabatan="Direktur",
        p2_alamat="Bandung, Indonesia",
        p2_email="klien@example.com",
        p2_telepon="0813-0000-0000",
        nilai_proyek_angka="10.000.000",
        nilai_proyek_terbilang="sepuluh juta rupiah",
        dp_percent="50%",
        dp_amount="5.000.000",
        termin2_percent="30%",
        termin2_amount="3.000.000",
        termin2_waktu="Setelah milestone 2",
        pelunasan_percent="20%",
        pelunasan_amount="2.000.000",
        bank_name="BCA",
        bank_number="1234567890",
        bank_account="Rasya Production",
    )


class AgreementPDF(FPDF):
    """A4 portrait document with the helpers shared by both templates."""

    LABEL_WIDTH = 58

    def __init__(self) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_margins(20, 18, 20)
        self.set_auto_page_break(True, margin=15)
        self.add_page()
        self.set_font("Helvetica", "", 10)

    def paragraph(self, text: str) -> None:
        self.multi_cell(0, 6, clean(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def bold_paragraph(self, text: str) -> None:
        self.set_font("Helvetica", "B", 10)
        self.paragraph(text)
        self.set_font("Helvetica", "", 10)

    def label_value(self, label: str, value: str) -> None:
        self.cell(self.LABEL_WIDTH, 6, clean(label), align="R", new_x=XPos.RIGHT, new_y=YPos.TOP)
        self.multi_cell(0, 6, " : " + clean(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def title_block(self, title: str, subtitle: str, nomor: str) -> None:
        self.set_font("Helvetica", "B", 13)
        self.cell(0, 8, title, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        half = self.get_string_width(title) / 2 + 10
        center = self.w / 2
        self.line(center - half, self.get_y() + 2, center + half, self.get_y() + 2)
        self.set_y(self.get_y() + 5)
        if subtitle:
            self.set_font("Helvetica", "I", 9)
            self.cell(0, 5, subtitle, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_font("Helvetica", "B", 10)
        self.cell(0, 6, "No: " + clean(nomor), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_font("Helvetica", "", 10)
        self.ln(2)

    def parties(self, data: AgreementData) -> None:
        self.paragraph(
            f"Pada hari ini, {data.hari}, tanggal {data.hari_num} bulan {data.bulan} tahun {data.tahun}, "
            f"bertempat di {data.tempat}, telah dibuat perjanjian pemberian jasa (selanjutnya \"Perjanjian\") "
            "oleh dan antara:"
        )
        self.ln(6)
        self.bold_paragraph("PIHAK PERTAMA (PENYEDIA JASA)")
        self.label_value("Nama", data.p1_nama)
        self.label_value("Bertindak sebagai", "Rasya Production")
        self.label_value("Alamat", data.p1_alamat)
        self.label_value("E-mail", data.p1_email)
        self.label_value("No. Telepon / WhatsApp", data.p1_telepon)
        self.paragraph('Selanjutnya disebut "Pihak Pertama" atau "Penyedia Jasa".')
        self.ln(4)
        self.bold_paragraph("PIHAK KEDUA (KLIEN)")
        self.label_value("Nama / Nama Perusahaan", data.p2_nama)
        self.label_value("Jabatan (jika ada)", data.p2_jabatan)
        self.label_value("Alamat", data.p2_alamat)
        self.label_value("E-mail", data.p2_email)
        self.label_value("No. Telepon / WhatsApp", data.p2_telepon)
        self.paragraph('Selanjutnya disebut "Pihak Kedua" atau "Klien".')
        self.ln(4)
        self.paragraph('Pihak Pertama dan Pihak Kedua secara bersama disebut "Para Pihak".')
        self.ln(6)

    def payment_table(self, data: AgreementData) -> None:
        widths = (15, 55, 35, 50)
        rows = [
            ("I", "Uang muka (DP)", f"{data.dp_percent} / Rp {data.dp_amount}", "Sebelum pekerjaan dimulai"),
            ("II", "Termin progress", f"{data.termin2_percent} / Rp {data.termin2_amount}", data.termin2_waktu),
            ("III", "Pelunasan", f"{data.pelunasan_percent} / Rp {data.pelunasan_amount}",
             "Saat serah terima / sesuai kesepakatan"),
        ]
        self.set_font("Helvetica", "B", 9)
        self._table_row(widths, ("Tahap", "Keterangan", "Jumlah", "Waktu"))
        self.set_font("Helvetica", "", 9)
        for row in rows:
            self._table_row(widths, row)
        self.set_font("Helvetica", "", 10)
        self.ln(2)

    def _table_row(self, widths, values) -> None:
        for index, (width, value) in enumerate(zip(widths, values)):
            last = index == len(widths) - 1
            self.cell(
                width, 7, clean(value), border=1, align="C" if index == 0 else "L",
                new_x=XPos.LMARGIN if last else XPos.RIGHT,
                new_y=YPos.NEXT if last else YPos.TOP,
            )

    def signature_block(self) -> None:
        self.bold_paragraph("TANDA TANGAN PARA PIHAK")
        self.paragraph(
            "Dengan ini Para Pihak menyatakan telah membaca, memahami, dan menyetujui seluruh isi Perjanjian ini."
        )
        self.ln(6)
        self._two_columns("PIHAK PERTAMA (Penyedia Jasa)", "PIHAK KEDUA (Klien)")
        self.ln(8)
        self._two_columns("Rasya Production", "")
        self.ln(12)
        self._two_columns("_________________________", "_________________________")
        self._two_columns("(...................................)", "(...................................)", 5)
        self._two_columns("Tanggal: .......................", "Tanggal: .......................", 5)

    def _two_columns(self, left: str, right: str, height: float = 6) -> None:
        self.cell(80, height, left, align="C", new_x=XPos.RIGHT, new_y=YPos.TOP)
        self.cell(75, height, right, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def articles(self, data: AgreementData, articles: List[Article]) -> None:
        for heading, paragraphs in articles:
            self.bold_paragraph(heading)
            for text in paragraphs:
                if text == _PAYMENT_TABLE:
                    self.ln(2)
                    self.payment_table(data)
                else:
                    self.paragraph(text)
            self.ln(4)

    def render(self, data: AgreementData, title: str, subtitle: str, articles: List[Article]) -> None:
        self.title_block(title, subtitle, data.nomor_perjanjian)
        self.paragraph(f"Tanggal: {data.tanggal}")
        self.ln(6)
        self.parties(data)
        self.articles(data, articles)


# marker inside an article's paragraph list where the payment table goes
_PAYMENT_TABLE = "\x00payment-table"


def _bank_line(data: AgreementData, number_label: str) -> str:
    return f"   Bank: {data.bank_name} | {number_label}: {data.bank_number} | Atas Nama: {data.bank_account}"


def profesional_articles(data: AgreementData) -> List[Article]:
    """Articles of the Master Service Agreement.

    The non‑compete article is only present when ``non_compete_bulan``
    is filled in; the articles after it are renumbered accordingly.
    """
    articles: List[Article] = [
        ("MAKSUD DAN RUANG LINGKUP", [
            "1.1. Pihak Pertama menyediakan jasa dalam bidang kreatif, desain, konten, dan/atau solusi digital (termasuk namun tidak terbatas pada: desain grafis, pengembangan website/aplikasi, konten kreatif, dan layanan terkait) sesuai dengan Surat Pesanan / Order atau kesepakatan tertulis yang menjadi lampiran Perjanjian ini.",
            "1.2. Ruang lingkup pekerjaan, spesifikasi teknis, jumlah revisi yang disepakati, dan tenggat waktu disesuaikan dengan Lampiran Scope of Work atau Surat Pesanan yang telah disetujui kedua belah pihak. Perubahan ruang lingkup wajib disepakati secara tertulis (e-mail sah sebagai bukti apabila kedua pihak mengakui).",
            "1.3. Pihak Pertama tidak berkewajiban mengerjakan pekerjaan di luar ruang lingkup yang telah disepakati, kecuali ada addendum atau surat kesepakatan tambahan.",
        ]),
        ("NILAI DAN PEMBAYARAN", [
            f"2.1. Nilai proyek sebesar Rp {data.nilai_proyek_angka} ({data.nilai_proyek_terbilang}) sesuai rincian dalam Surat Pesanan / Lampiran.",
            "2.2. Pembayaran dilakukan sesuai skema yang disepakati:",
            _PAYMENT_TABLE,
            "2.3. Pembayaran dilakukan melalui transfer bank ke rekening Pihak Pertama:",
            _bank_line(data, "Nomor Rekening"),
            "2.4. Pekerjaan baru dimulai setelah Pihak Pertama menerima pembayaran tahap pertama (DP) sesuai Pasal 2.2. Keterlambatan pembayaran tahap berikutnya dapat mengakibatkan penundaan penyerahan hasil kerja tanpa dianggap kelalaian Pihak Pertama.",
            f"2.5. Keterlambatan pembayaran melebihi {data.keterlambatan_hari} hari dari jadwal yang disepakati tanpa pemberitahuan yang dapat diterima, memberikan hak kepada Pihak Pertama untuk menjeda pekerjaan hingga pembayaran diterima, tanpa kewajiban ganti rugi kepada Pihak Kedua.",
            "2.6. Keterlambatan pembayaran dikenakan denda sebesar 1% (satu persen) per minggu dari nilai tagihan tertunggak, maksimal 10% (sepuluh persen) dari total nilai tagihan yang tertunggak, atau opsi bunga yang disepakati secara tertulis.",
        ]),
        ("MILESTONE DAN PENERIMAAN BERTAHAP", [
            "3.1. Pekerjaan dapat dibagi ke dalam beberapa milestone sesuai Lampiran Scope of Work. Setiap milestone memiliki deliverable, tenggat waktu, dan kriteria penerimaan yang disepakati.",
            f"3.2. Detail milestone: {data.milestone_detail}" if data.milestone_detail
            else "3.2. Detail milestone akan ditetapkan dalam Lampiran Scope of Work atau Surat Pesanan terpisah.",
            f"3.3. Pihak Kedua wajib memberikan persetujuan atau daftar koreksi dalam waktu {data.serah_terima_hari} hari kerja setelah penyerahan setiap milestone. Apabila dalam jangka waktu tersebut tidak ada tanggapan tertulis, milestone dianggap diterima.",
            "3.4. Pembayaran termin berikutnya dapat dikaitkan dengan penerimaan milestone sebelumnya, sesuai skema di Pasal 2.",
        ]),
        ("REVISI DAN PERUBAHAN", [
            f"4.1. Pihak Pertama menyediakan {data.revisi_putaran} putaran revisi yang wajar (minor) sesuai ruang lingkup yang disepakati. Revisi dimaksud tidak termasuk perubahan mendasar konsep atau penambahan fitur baru di luar scope awal.",
            f"4.2. Permintaan revisi disampaikan secara tertulis (e-mail/chat resmi) dalam waktu {data.revisi_hari} hari setelah penyerahan draft/hasil kerja. Revisi di luar batas putaran atau di luar batas waktu dapat dikenakan biaya tambahan berdasarkan kesepakatan tertulis.",
            "4.3. Perubahan besar (perluasan scope, tambahan fitur, perubahan fundamental) hanya berlaku setelah disetujui tertulis dan apabila ada penyesuaian nilai dan/atau jadwal.",
        ]),
        ("SERVICE LEVEL AGREEMENT (SLA)", [
            f"5.1. Pihak Pertama berkomitmen merespons komunikasi terkait proyek (e-mail, chat resmi) dalam waktu {data.sla_response_time or DEFAULT_SLA_RESPONSE_TIME}, kecuali di luar hari/jam kerja yang disepakati.",
            f"5.2. Untuk layanan yang mencakup hosting atau pemeliharaan: Pihak Pertama menargetkan uptime sebesar {data.sla_uptime} per bulan, tidak termasuk downtime akibat pemeliharaan terjadwal atau force majeure." if data.sla_uptime
            else "5.2. Apabila pekerjaan mencakup layanan hosting atau pemeliharaan, target uptime dan ketentuan pemeliharaan akan diatur dalam Lampiran SLA terpisah.",
            "5.3. Pelanggaran SLA yang material dan berulang (lebih dari 3 kali dalam 1 bulan) memberikan hak kepada Pihak Kedua untuk mengajukan kompensasi berupa perpanjangan waktu pengerjaan atau pengurangan tagihan, sesuai kesepakatan tertulis.",
        ]),
        ("HAK KEKAYAAN INTELEKTUAL DAN PENGGUNAAN", [
            "6.1. Seluruh kode sumber (source code), arsitektur sistem, metode, dan aset yang telah ada sebelumnya (pre-existing assets) milik Pihak Pertama tetap menjadi milik Pihak Pertama.",
            "6.2. Setelah pelunasan pembayaran penuh, hak penggunaan atas deliverables final diberikan kepada Pihak Kedua. Hak penggunaan tersebut bersifat non-eksklusif dan terbatas pada penggunaan internal/komersial sesuai tujuan proyek yang disepakati, dan tidak termasuk hak menjual ulang, sub-lisensi, atau memodifikasi secara signifikan tanpa persetujuan tertulis Pihak Pertama.",
            "6.3. Pihak Pertama berhak menampilkan proyek dalam portofolio, situs web, dan materi promosi Rasya Production, kecuali Pihak Kedua menyatakan keberatan tertulis sebelum penandatanganan Perjanjian.",
            "6.4. Hak cipta atas elemen desain, template, dan framework generik yang dikembangkan Pihak Pertama tetap menjadi milik Pihak Pertama dan dapat digunakan kembali untuk proyek lain.",
        ]),
        ("KEWAJIBAN KLIEN", [
            "7.1. Pihak Kedua wajib menyediakan bahan, data, aset (logo, teks, gambar, akses) yang diperlukan untuk pelaksanaan pekerjaan tepat waktu. Keterlambatan penyediaan bahan dapat mengakibatkan pergeseran jadwal tanpa dianggap kelalaian Pihak Pertama.",
            f"7.2. Pihak Kedua wajib menanggapi konfirmasi, draft, dan permintaan klarifikasi dari Pihak Pertama dalam waktu wajar ({data.konfirmasi_hari} hari kerja) agar proyek dapat diselesaikan sesuai jadwal.",
            "7.3. Pihak Kedua bertanggung jawab atas kebenaran dan legalitas konten, data, serta materi yang diserahkan kepada Pihak Pertama untuk digunakan dalam proyek.",
        ]),
        ("PERLINDUNGAN DATA", [
            "8.1. Pihak Pertama wajib menjaga keamanan data dan informasi milik Pihak Kedua yang diterima dalam rangka pelaksanaan proyek, termasuk data pelanggan, data keuangan, dan data pribadi (jika ada).",
            "8.2. Pihak Pertama tidak akan membagikan, menjual, atau menggunakan data tersebut untuk keperluan di luar proyek yang disepakati, kecuali diwajibkan oleh hukum.",
            "8.3. Setelah proyek selesai dan pelunasan dilakukan, Pihak Pertama akan mengembalikan atau menghapus data milik Pihak Kedua dalam waktu 30 (tiga puluh) hari setelah permintaan tertulis, kecuali diperlukan untuk arsip portofolio sesuai Pasal 6.3.",
        ] + ([f"8.4. Penanggung jawab perlindungan data: {data.data_protection_pic}."] if data.data_protection_pic else [])),
        ("KERAHASIAAN", [
            "9.1. Para Pihak menjaga kerahasiaan informasi bisnis, teknis, dan data yang diperoleh sehubungan dengan proyek ini. Kewajiban kerahasiaan berlaku selama proyek dan 2 (dua) tahun setelah berakhirnya Perjanjian.",
            "9.2. Informasi yang secara wajar telah bersifat publik, telah dimiliki sebelumnya secara sah, atau wajib diungkapkan berdasarkan hukum dikecualikan dari kewajiban kerahasiaan.",
            "9.3. Pelanggaran kerahasiaan memberikan hak kepada pihak yang dirugikan untuk menuntut ganti rugi sesuai hukum yang berlaku.",
        ]),
        ("PEMBATASAN TANGGUNG JAWAB", [
            f"10.1. Tanggung jawab Pihak Pertama terbatas pada perbaikan atas cacat material pada hasil kerja yang diserahkan, sepanjang dilaporkan dalam waktu {data.tanggung_jawab_hari} hari kerja setelah serah terima dan tidak disebabkan oleh perubahan atau penggunaan di luar spesifikasi oleh Pihak Kedua.",
            "10.2. Pihak Pertama tidak bertanggung jawab atas: (a) kerugian tidak langsung, kehilangan keuntungan, atau kerugian konsekuensial; (b) kerugian akibat keterlambatan bahan dari Pihak Kedua, force majeure, atau tindakan pihak ketiga; (c) penggunaan hasil kerja untuk keperluan yang melanggar hukum atau di luar yang disepakati.",
            "10.3. Tanggung jawab Pihak Pertama secara kumulatif dibatasi maksimal sebesar nilai proyek yang telah dibayarkan oleh Pihak Kedua untuk proyek yang bersangkutan.",
        ]),
        ("INDEMNITY (GANTI RUGI)", [
            "11.1. Masing-masing Pihak setuju untuk mengganti kerugian dan membebaskan Pihak lainnya dari dan terhadap segala klaim, tuntutan, kerugian, biaya (termasuk biaya hukum yang wajar) yang timbul akibat: (a) pelanggaran kewajiban berdasarkan Perjanjian ini; (b) kelalaian atau kesalahan yang disengaja oleh Pihak yang bersangkutan.",
            "11.2. Pihak Kedua mengganti kerugian Pihak Pertama atas klaim pihak ketiga yang timbul dari konten, data, atau materi yang disediakan oleh Pihak Kedua dan digunakan dalam proyek sesuai instruksi Pihak Kedua.",
            "11.3. Pihak Pertama mengganti kerugian Pihak Kedua atas klaim pihak ketiga terkait pelanggaran hak kekayaan intelektual yang disebabkan oleh aset orisinal yang dibuat Pihak Pertama, sepanjang bukan berasal dari materi yang disediakan Pihak Kedua.",
        ]),
        ("FORCE MAJEURE", [
            "12.1. Yang dimaksud Force Majeure adalah keadaan di luar kendali Para Pihak seperti bencana alam, kebakaran, perang, pandemi, gangguan sistem nasional, pemadaman listrik massal, kebijakan pemerintah, dan keadaan lain yang secara wajar tidak dapat diprediksi.",
            "12.2. Pihak yang mengalami Force Majeure wajib memberitahukan secara tertulis dalam waktu 7 (tujuh) hari sejak terjadinya keadaan tersebut, disertai bukti yang wajar.",
            "12.3. Selama Force Majeure berlangsung, kewajiban yang terdampak ditangguhkan tanpa dianggap wanprestasi.",
            "12.4. Apabila Force Majeure berlangsung lebih dari 60 (enam puluh) hari, masing-masing Pihak berhak mengakhiri Perjanjian dengan pemberitahuan tertulis; penyelesaian keuangan dilakukan secara proporsional sesuai pekerjaan yang telah diselesaikan.",
        ]),
        ("NON-SOLICITATION", [
            "13.1. Pihak Kedua tidak diperkenankan merekrut langsung karyawan, freelancer, atau mitra Pihak Pertama selama proyek berlangsung dan 12 (dua belas) bulan setelah berakhirnya proyek tanpa persetujuan tertulis Pihak Pertama.",
            "13.2. Pelanggaran ketentuan ini mewajibkan Pihak Kedua membayar kompensasi sebesar 3 (tiga) kali gaji/fee bulanan terakhir personel yang bersangkutan, atau sesuai nilai yang disepakati tertulis.",
        ]),
    ]
    if data.non_compete_bulan:
        articles.append(("NON-COMPETE", [
            f"14.1. Selama proyek berlangsung dan {data.non_compete_bulan} bulan setelahnya, Pihak Pertama tidak akan secara langsung mengerjakan proyek untuk kompetitor langsung Pihak Kedua dalam bidang usaha yang sama, kecuali disepakati lain secara tertulis.",
            "14.2. Ketentuan ini hanya berlaku apabila Pihak Kedua telah mengidentifikasi secara tertulis nama kompetitor yang dimaksud dalam Lampiran. Pasal ini tidak berlaku jika tidak ada Lampiran kompetitor.",
        ]))
    n = len(articles) + 1
    articles.append(("PEMUTUSAN PERJANJIAN", [
        f"{n}.1. Perjanjian dapat diakhiri lebih awal atas kesepakatan tertulis Para Pihak, atau apabila salah satu pihak melanggar kewajiban material dan tidak memperbaiki dalam waktu {data.pemutusan_hari} hari setelah teguran tertulis.",
        f"{n}.2. Apabila pemutusan dilakukan atas inisiatif Pihak Kedua (Klien membatalkan proyek): pembayaran yang telah disetor tidak dapat diminta kembali; Pihak Pertama wajib menyerahkan hasil kerja yang telah selesai hingga saat pemutusan sesuai bagian yang telah dibayar.",
        f"{n}.3. Apabila pemutusan dilakukan karena kelalaian Pihak Pertama yang material: Pihak Kedua berhak meminta pengembalian proporsional atas pembayaran yang belum diimbangi dengan hasil kerja, atau perbaikan dalam waktu yang disepakati.",
        f"{n}.4. Kewajiban kerahasiaan (Pasal 9), perlindungan data (Pasal 8), dan hak kekayaan intelektual (Pasal 6) tetap berlaku setelah pemutusan Perjanjian.",
    ]))
    n += 1
    articles.append(("PENYELESAIAN SENGKETA", [
        f"{n}.1. Setiap perselisihan yang timbul dari atau sehubungan dengan Perjanjian ini akan diselesaikan terlebih dahulu melalui musyawarah untuk mufakat dalam waktu 30 (tiga puluh) hari.",
        f"{n}.2. Apabila musyawarah tidak menghasilkan kesepakatan, Para Pihak sepakat untuk menempuh mediasi melalui mediator yang disetujui bersama, dengan biaya mediasi ditanggung bersama secara proporsional.",
        f"{n}.3. Apabila mediasi tidak berhasil dalam waktu 30 (tiga puluh) hari, perselisihan akan diselesaikan melalui Badan Arbitrase Nasional Indonesia (BANI) atau Pengadilan Negeri yang berwenang di wilayah tempat kedudukan Pihak Pertama.",
    ]))
    n += 1
    articles.append(("KETENTUAN UMUM", [
        f"{n}.1. Hubungan Para Pihak adalah hubungan independen kontraktual dan tidak menciptakan hubungan kerja, kemitraan, atau joint venture.",
        f"{n}.2. Apabila salah satu ketentuan dalam Perjanjian ini dinyatakan tidak sah atau tidak dapat dilaksanakan, maka ketentuan lainnya tetap berlaku secara penuh (severability).",
        f"{n}.3. Perjanjian ini merupakan keseluruhan kesepakatan antara Para Pihak mengenai pokok permasalahan dalam Perjanjian ini dan menggantikan seluruh negosiasi, diskusi, atau perjanjian sebelumnya.",
        f"{n}.4. Perjanjian ini dibuat dalam Bahasa Indonesia. Apabila terdapat versi terjemahan, versi Bahasa Indonesia yang berlaku dan mengikat.",
        f"{n}.5. Setiap perubahan atau amandemen terhadap Perjanjian ini hanya berlaku apabila dibuat secara tertulis dan ditandatangani oleh kedua belah Pihak.",
        f"{n}.6. Perjanjian ini tunduk pada hukum Negara Republik Indonesia.",
        f"{n}.7. Perjanjian ini dibuat dalam 2 (dua) rangkap bermeterai cukup, masing-masing memiliki kekuatan hukum yang sama.",
    ]))
    return [(f"PASAL {i} - {heading}", paragraphs) for i, (heading, paragraphs) in enumerate(articles, start=1)]


def standar_articles(data: AgreementData) -> List[Article]:
    articles: List[Article] = [
        ("RUANG LINGKUP", [
            "1.1. Pihak Pertama menyediakan jasa kreatif, desain, konten, dan/atau solusi digital sesuai dengan Surat Pesanan / Order atau kesepakatan tertulis yang menjadi lampiran Perjanjian ini.",
            "1.2. Ruang lingkup pekerjaan dan tenggat waktu disesuaikan dengan kesepakatan tertulis kedua belah pihak. Perubahan scope wajib disepakati secara tertulis.",
        ]),
        ("NILAI DAN PEMBAYARAN", [
            f"2.1. Nilai proyek sebesar Rp {data.nilai_proyek_angka} ({data.nilai_proyek_terbilang}).",
            "2.2. Pembayaran dilakukan sesuai skema yang disepakati:",
            _PAYMENT_TABLE,
            "2.3. Pembayaran melalui transfer bank ke rekening Pihak Pertama:",
            _bank_line(data, "No. Rekening"),
            "2.4. Pekerjaan dimulai setelah pembayaran DP diterima. Keterlambatan pembayaran dapat mengakibatkan penundaan pekerjaan tanpa dianggap kelalaian Pihak Pertama.",
        ]),
        ("REVISI", [
            f"3.1. Pihak Pertama menyediakan {data.revisi_putaran} putaran revisi minor sesuai scope. Revisi di luar putaran dapat dikenakan biaya tambahan.",
            f"3.2. Permintaan revisi disampaikan secara tertulis dalam waktu {data.revisi_hari} hari setelah penyerahan draft.",
        ]),
        ("HAK KEKAYAAN INTELEKTUAL", [
            "4.1. Aset pre-existing milik Pihak Pertama tetap menjadi milik Pihak Pertama. Setelah pelunasan, hak penggunaan deliverables final diberikan kepada Pihak Kedua secara non-eksklusif sesuai tujuan proyek.",
            "4.2. Pihak Pertama berhak menampilkan proyek dalam portofolio, kecuali Pihak Kedua menyatakan keberatan tertulis sebelum penandatanganan.",
        ]),
        ("PEMBATASAN TANGGUNG JAWAB", [
            f"5.1. Tanggung jawab Pihak Pertama terbatas pada perbaikan cacat material, sepanjang dilaporkan dalam waktu {data.tanggung_jawab_hari} hari kerja setelah serah terima.",
            "5.2. Pihak Pertama tidak bertanggung jawab atas kerugian tidak langsung, kehilangan keuntungan, atau kerugian konsekuensial.",
            "5.3. Total tanggung jawab Pihak Pertama dibatasi sebesar nilai proyek yang telah dibayarkan.",
        ]),
        ("SERAH TERIMA", [
            f"6.1. Pihak Kedua wajib memberikan konfirmasi penerimaan atau koreksi dalam {data.serah_terima_hari} hari kerja setelah penyerahan. Tanpa tanggapan tertulis, hasil kerja dianggap diterima.",
        ]),
        ("PEMUTUSAN PERJANJIAN", [
            f"7.1. Perjanjian dapat diakhiri atas kesepakatan tertulis, atau jika salah satu pihak wanprestasi dan tidak memperbaiki dalam {data.pemutusan_hari} hari setelah teguran tertulis.",
            "7.2. Pembatalan oleh Pihak Kedua: pembayaran yang telah disetor tidak dikembalikan; hasil kerja yang selesai diserahkan. Pembatalan karena kelalaian Pihak Pertama: pengembalian proporsional sesuai pekerjaan yang belum diselesaikan.",
        ]),
        ("HUKUM DAN PENYELESAIAN SENGKETA", [
            "8.1. Perjanjian ini tunduk pada hukum Negara Republik Indonesia.",
            "8.2. Perselisihan diselesaikan secara musyawarah; apabila tidak tercapai, melalui Pengadilan Negeri yang berwenang.",
        ]),
        ("KETENTUAN UMUM", [
            "9.1. Hubungan Para Pihak adalah hubungan independen kontraktual.",
            "9.2. Apabila salah satu ketentuan dinyatakan tidak sah, ketentuan lainnya tetap berlaku.",
            "9.3. Perjanjian ini dibuat dalam 2 (dua) rangkap bermeterai cukup, masing-masing memiliki kekuatan hukum yang sama.",
        ]),
    ]
    return [(f"PASAL {i} - {heading}", paragraphs) for i, (heading, paragraphs) in enumerate(articles, start=1)]


class AgreementService:

    @classmethod
    def is_profesional(cls, data: AgreementData) -> bool:
        return data.tier.strip().lower() == "profesional"

    @classmethod
    def generate_pdf(cls, data: AgreementData) -> bytes:
        """Render the agreement for ``data`` (defaults applied) as PDF bytes."""
        data = apply_defaults(data)
        pdf = AgreementPDF()
        if cls.is_profesional(data):
            pdf.render(data, "PERJANJIAN JASA PROFESIONAL", "Master Service Agreement", profesional_articles(data))
            if data.escalation_pic1 or data.escalation_pic2:
                pdf.bold_paragraph("LAMPIRAN: PROSEDUR ESKALASI")
                pdf.paragraph("Apabila terjadi permasalahan operasional, eskalasi dilakukan bertahap:")
                if data.escalation_pic1:
                    pdf.paragraph(f"  Tingkat 1 (operasional): {data.escalation_pic1}")
                if data.escalation_pic2:
                    pdf.paragraph(f"  Tingkat 2 (manajerial/direktur): {data.escalation_pic2}")
                pdf.paragraph(
                    "Apabila eskalasi tingkat 2 tidak menghasilkan resolusi dalam 14 hari kerja, "
                    "mekanisme penyelesaian sengketa di atas berlaku."
                )
            pdf.ln(2)
            pdf.signature_block()
            pdf.ln(6)
            pdf.paragraph(
                "Lampiran (wajib dilampirkan saat penandatanganan): Lampiran A - Surat Pesanan / Order; "
                "Lampiran B - Scope of Work (SOW); Lampiran C - Daftar Milestone (jika ada); "
                "Lampiran D - Daftar Kompetitor (jika Pasal Non-Compete berlaku)."
            )
            pdf.ln(4)
            pdf.paragraph(
                "Dokumen ini adalah kerangka Perjanjian Jasa Profesional Rasya Production. Untuk proyek dengan "
                "nilai atau risiko khusus, disarankan konsultasi dengan konsultan hukum."
            )
        else:
            pdf.render(data, "PERJANJIAN JASA STANDAR", "Standard Service Agreement", standar_articles(data))
            pdf.ln(2)
            pdf.signature_block()
            pdf.ln(6)
            pdf.paragraph("Lampiran: Surat Pesanan / Order; Scope of Work (SOW) jika ada.")
            pdf.ln(4)
            pdf.paragraph("Dokumen ini adalah kerangka Perjanjian Jasa Standar Rasya Production.")
        logger.info("Generated %s agreement %s", data.tier or "standar", data.nomor_perjanjian or "(tanpa nomor)")
        return bytes(pdf.output())
