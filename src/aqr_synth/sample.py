"""Published sample data and preset fixture scenarios."""
from __future__ import annotations

from .mutations import Mutations

# UIDAI's published legacy secure QR sample, as printed on the code
# https://uidai.gov.in/en/ecosystem/authentication-devices-documents/qr-code-reader.html
SAMPLE_QR_DATA = (
    "2374971804270526477833002468783965837992554564899874087591661303561346432389"
    "8320478705243021869013444893623686429727677164163499908057560949231157196876"
    "5609069136805162795787818778890741929781895329518555534628817257859463788635"
    "2753543271000481717080003254556962148594350559820352806251787713278744047402"
    "2309892385593173512321142400898499341488952564881402360150248007317535947409"
    "4864095768013856646824722485966946781959691939896480916439963789372921245279"
    "1889199675715949918925838319591794702333094022248132120531152523331442741730"
    "1588409772434022151029049326508325028472956447944214197046337650337612845088"
    "6353432131739468676865011145775113963085344863721542370515721151063616022795"
    "3566227527799608082928846103264491539001327407775670834868948113753614112563"
    "6502550583168492005365333359035549842548149015220869377674584090756175728434"
    "4911039321352592538813121495287462965579977211982037225529105267305637234607"
    "2235458198199995637720424196884145247220163810790179386390283738429482893152"
    "5182862471249114460733891850624829013646713896057277630808546731567540217285"
    "2228780627542084715957463184467446026357490159041267929151850801008711659835"
    "7407343835408554094619585212373168435612645646129147973594416508676872819776"
    "5225377787179850704022228249650347681039007391057846632447484325021809894413"
    "8971813107944594198168111825832451192324619833404602012372774940812851972110"
    "2477302359413240175102907322619462289965085963377744024233678337951462006962"
    "5218232248801992103183679461300042641968997786098150120017997733275141332688"
    "2591008948361228351024456648485459715610047305541309010194845695912237886570"
    "4840756793122956663218517626099291311352417342899623681483097817511136427210"
    "5930323936000107283249055125967670950961538560321128357557804728088141996203"
    "9083698002089985828886055661156416740629213964628914205616826113325677709324"
    "5980048335918156712295254776487472431445495668303900536289283098315798552328"
    "2943911528281826149094514101155162970836581746575549552289635502558662826883"
    "0875104151746499993082527377641763956997775484419140292759473906903785170747"
    "7839207593911886893016618794870530622356073909077832279869798641545167528509"
    "9666561206231841201280525884087429416580458272558669661002498579689565366132"
    "5077032633484420492743296192498789143302067175471042805056467186846465843692"
    "6086493709176888821257183419013229795869757265111599482263223604228286513011"
    "7516011765045670301182573859974609728032403388998368400304388307255207984801"
    "8157586139746905653657987727409033875040645970090770403183013789054449201570"
    "1251066934352867527112361743047684237105216779177819594030160887368311805926"
    "4051149387442358596103280649471589369624706546367369915676637058309503125484"
    "4765386192207808782404879323697135482854075865707583720900671370176390242965"
    "2486225300535997260665898927924843608750347193892239342462507130025307878412"
    "1166040967737067281620161341017515511840210799844802540417430579147464728407"
    "6817536936985293757440187429594306350727346738474712484374439537511989927882"
    "3903202010381949145094804675442110869084589592876721655764753871572233276245"
    "5900413028870945852044279006342468236742776800094011774736366855427005156211"
    "64233992970974893989913447733956146698563285998205950467321954304"
)

PRESETS: dict[str, Mutations] = {
    "delhi": Mutations(pincode="110051", state="Delhi", photo=True),
    "born_1985": Mutations(dob="01-01-1985", photo=True),
    "female_1955": Mutations(dob="01-08-1955", gender="F", photo=True),
}
