"""
Adaptador de salida: Escritor de XML SEPA (pain.008.001.02).

Convierte la remesa parseada con el SepaMapper y la serializa con
xml.etree.ElementTree, en ISO-8859-1 y con declaración XML.

Estructura generada:

    Document
    └── CstmrDrctDbtInitn
        ├── GrpHdr (MsgId, CreDtTm, NbOfTxs, CtrlSum, InitgPty)
        └── PmtInf*  (uno por acreedor y fecha de cobro)
            └── DrctDbtTxInf*  (uno por adeudo)
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from remesas.domain.exceptions import OutputError
from remesas.domain.models.batch_document import BatchDocument
from remesas.domain.models.sepa import (
    XSI_NAMESPACE,
    SepaDocument,
    SepaPayment,
    SepaTransaction,
)
from remesas.domain.ports.output_writer import OutputWriter
from remesas.domain.services.sepa_mapper import SepaMapper


class SepaXmlWriter(OutputWriter):
    """Genera el XML de adeudos SEPA de una remesa."""

    ENCODING: str = "iso-8859-1"

    def __init__(self, mapper: SepaMapper | None = None, pretty: bool = True) -> None:
        """
        Args:
            mapper: Conversor a SepaDocument. Por defecto uno con valores fijos.
            pretty: Si True, indenta el XML con 2 espacios.
        """
        self._mapper = mapper or SepaMapper()
        self._pretty = pretty

    def write(self, documento: BatchDocument, output_path: Path) -> Path:
        if output_path.suffix.lower() != ".xml":
            output_path = output_path.with_suffix(".xml")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("wb") as f:
                self._escribir(documento, f)
        except OSError as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def write_stream(self, documento: BatchDocument, stream: BinaryIO) -> None:
        try:
            self._escribir(documento, stream)
        except OSError as e:
            raise OutputError("<stream>", str(e)) from e

    def to_element(self, sepa: SepaDocument) -> ET.Element:
        """Construye el árbol XML de un SepaDocument."""
        root = ET.Element("Document", {"xmlns": sepa.namespace, "xmlns:xsi": XSI_NAMESPACE})
        initn = ET.SubElement(root, "CstmrDrctDbtInitn")

        grp = ET.SubElement(initn, "GrpHdr")
        _sub(grp, "MsgId", sepa.msg_id)
        _sub(grp, "CreDtTm", sepa.creation_date_time)
        _sub(grp, "NbOfTxs", str(sepa.transaction_count))
        _sub(grp, "CtrlSum", sepa.control_sum)
        party = sepa.initiating_party
        _sub(grp, "InitgPty/Nm", party.name)
        _sub(grp, "InitgPty/Id/OrgId/Othr/Id", party.id)
        _sub(grp, "InitgPty/Id/OrgId/Othr/SchmeNm/Prtry", party.scheme)

        for pago in sepa.payments:
            self._payment(initn, pago)

        return root

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _escribir(self, documento: BatchDocument, stream: BinaryIO) -> None:
        root = self.to_element(self._mapper.map(documento))
        if self._pretty:
            ET.indent(root, space="  ")
        ET.ElementTree(root).write(stream, encoding=self.ENCODING, xml_declaration=True)

    def _payment(self, parent: ET.Element, pago: SepaPayment) -> None:
        pmt = ET.SubElement(parent, "PmtInf")
        _sub(pmt, "PmtInfId", pago.id)
        _sub(pmt, "PmtMtd", pago.method)
        _sub(pmt, "NbOfTxs", str(pago.transaction_count))
        _sub(pmt, "CtrlSum", pago.control_sum)
        _sub(pmt, "PmtTpInf/SvcLvl/Cd", pago.service_level)
        _sub(pmt, "PmtTpInf/LclInstrm/Cd", pago.local_instrument)
        _sub(pmt, "PmtTpInf/SeqTp", pago.sequence_type)
        _sub(pmt, "ReqdColltnDt", pago.requested_collection_date)

        acreedor = pago.creditor
        _sub(pmt, "Cdtr/Nm", acreedor.name)
        lineas = [linea for linea in acreedor.address if linea]
        if acreedor.country or lineas:
            cdtr = pmt.find("Cdtr")
            direccion = ET.SubElement(cdtr, "PstlAdr")
            if acreedor.country:
                _sub(direccion, "Ctry", acreedor.country)
            for linea in lineas:
                ET.SubElement(direccion, "AdrLine").text = linea
        _sub(pmt, "CdtrAcct/Id/IBAN", acreedor.iban)
        _sub(pmt, "CdtrAgt/FinInstnId/BIC", acreedor.bic)
        _sub(pmt, "ChrgBr", acreedor.charge_bearer)
        _sub(pmt, "CdtrSchmeId/Id/PrvtId/Othr/Id", acreedor.id)
        _sub(pmt, "CdtrSchmeId/Id/PrvtId/Othr/SchmeNm/Prtry", acreedor.scheme_name)

        for adeudo in pago.transactions:
            self._transaction(pmt, adeudo)

    def _transaction(self, parent: ET.Element, adeudo: SepaTransaction) -> None:
        tx = ET.SubElement(parent, "DrctDbtTxInf")
        _sub(tx, "PmtId/EndToEndId", adeudo.id)
        importe = _sub(tx, "InstdAmt", adeudo.amount)
        importe.set("Ccy", adeudo.currency)
        _sub(tx, "DrctDbtTx/MndtRltdInf/MndtId", adeudo.mandate_id)
        _sub(tx, "DrctDbtTx/MndtRltdInf/DtOfSgntr", adeudo.signature_date)
        _sub(tx, "DbtrAgt/FinInstnId/BIC", adeudo.debtor.bic)
        _sub(tx, "Dbtr/Nm", adeudo.debtor.name)
        _sub(tx, "DbtrAcct/Id/IBAN", adeudo.debtor.iban)
        _sub(tx, "RmtInf/Ustrd", adeudo.remittance_info)


def _sub(parent: ET.Element, path: str, text: str) -> ET.Element:
    """Crea (o reutiliza) la ruta 'A/B/C' bajo `parent` y pone el texto en C.

    Los segmentos intermedios se reutilizan si son el último hijo con esa
    etiqueta, de modo que rutas consecutivas con prefijo común quedan bajo
    el mismo elemento (PmtTpInf/SvcLvl y PmtTpInf/LclInstrm).
    """
    *intermedios, hoja = path.split("/")
    nodo = parent
    for tag in intermedios:
        hijos = list(nodo)
        if hijos and hijos[-1].tag == tag:
            nodo = hijos[-1]
        else:
            nodo = ET.SubElement(nodo, tag)
    elemento = ET.SubElement(nodo, hoja)
    elemento.text = text
    return elemento
