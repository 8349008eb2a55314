"""
Pydantic model for the agreement (perjanjian) generator.

Every field is plain text inserted into the document as typed by the
admin.  ``tier`` selects the template: ``"profesional"`` produces the
Master Service Agreement, anything else the Standard Service
Agreement.  Empty date and period fields are filled with defaults by
``AgreementService``.
"""

from pydantic import BaseModel, Field


class AgreementData(BaseModel):
    tier: str = Field("standar", description="standar | profesional")

    nomor_perjanjian: str = Field("", examples=["RP-2025-001"])
    tanggal: str = ""
    hari: str = ""
    hari_num: str = ""
    bulan: str = ""
    tahun: str = ""
    tempat: str = ""

    # Pihak Pertama (penyedia jasa)
    p1_nama: str = ""
    p1_alamat: str = ""
    p1_email: str = ""
    p1_telepon: str = ""

    # Pihak Kedua (klien)
    p2_nama: str = ""
    p2_jabatan: str = ""
    p2_alamat: str = ""
    p2_email: str = ""
    p2_telepon: str = ""

    nilai_proyek_angka: str = ""
    nilai_proyek_terbilang: str = ""
    dp_percent: str = ""
    dp_amount: str = ""
    termin2_percent: str = ""
    termin2_amount: str = ""
    termin2_waktu: str = ""
    pelunasan_percent: str = ""
    pelunasan_amount: str = ""
    bank_name: str = ""
    bank_number: str = ""
    bank_account: str = ""
    keterlambatan_hari: str = ""

    revisi_putaran: str = ""
    revisi_hari: str = ""
    konfirmasi_hari: str = ""
    serah_terima_hari: str = ""
    tanggung_jawab_hari: str = ""
    pemutusan_hari: str = ""

    # Profesional only
    sla_response_time: str = Field("", examples=["1x24 jam kerja"])
    sla_uptime: str = Field("", examples=["99.5%"])
    milestone_detail: str = ""
    non_compete_bulan: str = Field("", description="Kosong = tanpa pasal non-compete")
    data_protection_pic: str = ""
    escalation_pic1: str = ""
    escalation_pic2: str = ""
